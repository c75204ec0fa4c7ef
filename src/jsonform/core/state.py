"""
Estado mutable de una sesión de llenado de formulario.

Solo el orquestador (y el navegador del wizard, para el índice de paso)
modifica una sesión.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional


@dataclass
class FormSession:
    """Valores, errores, campos tocados y paso actual."""
    values: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    touched: set[str] = field(default_factory=set)
    current_step: int = 0

    @classmethod
    def seeded(cls, initial: Optional[Mapping[str, Any]] = None) -> "FormSession":
        """Crea una sesión vacía o sembrada con datos del llamador."""
        return cls(values=dict(initial or {}))

    def set_value(self, field_id: str, value: Any) -> None:
        """Actualización inmutable: reemplaza el mapa de valores por uno nuevo."""
        self.values = {**self.values, field_id: value}

    def set_error(self, field_id: str, message: str) -> None:
        self.errors = {**self.errors, field_id: message}

    def clear_error(self, field_id: str) -> None:
        if field_id in self.errors:
            self.errors = {k: v for k, v in self.errors.items() if k != field_id}

    def replace_errors(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)

    def touch(self, field_id: str) -> None:
        self.touched = self.touched | {field_id}

    def touch_all(self, field_ids: Iterable[str]) -> None:
        self.touched = self.touched | set(field_ids)

    def snapshot(self) -> dict[str, Any]:
        """Copia de los valores actuales."""
        return dict(self.values)

    def visible_errors(self) -> dict[str, str]:
        """Errores que se muestran: solo los de campos tocados."""
        return {k: v for k, v in self.errors.items() if k in self.touched}
