"""
Excepciones del intérprete de formularios.

Solo los errores de configuración se lanzan como excepción. Los errores de
validación de campos y los envíos rechazados son valores que el llamador lee
(mapa de errores y SubmitResult).
"""

from typing import Optional


class ConfigurationError(Exception):
    """El documento de configuración no permite iniciar la sesión."""

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.errors: list[str] = list(errors) if errors else [message]
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if len(self.errors) <= 1:
            return base
        detail = "\n".join(f"  - {e}" for e in self.errors)
        return f"{base}\n{detail}"
