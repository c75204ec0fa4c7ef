"""
Orquestador del formulario.

Recibe los eventos de la interfaz (cambio, blur, envío, reinicio, navegación),
mantiene la sesión y notifica a la aplicación anfitriona.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from jsonform.config import EngineSettings, FormConfig, FormField, load_config
from jsonform.core.dependencies import is_enabled, is_visible, visible_fields
from jsonform.core.handlers import HandlerRegistry
from jsonform.core.state import FormSession
from jsonform.core.validation import FormValidator
from jsonform.core.wizard import StepProgress, StepResult, WizardNavigator

logger = logging.getLogger(__name__)

ValuesCallback = Callable[[dict], Any]


@dataclass
class SubmitResult:
    """Resultado de un envío: datos aceptados o mapa de errores."""
    data: Optional[dict] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class FormOrchestrator:
    """Fachada del intérprete: dueña exclusiva de la sesión."""

    def __init__(
        self,
        config: Union[FormConfig, dict],
        initial_values: Optional[Mapping[str, Any]] = None,
        on_change: Optional[ValuesCallback] = None,
        on_submit: Optional[ValuesCallback] = None,
        handlers: Optional[HandlerRegistry] = None,
        settings: Optional[EngineSettings] = None,
    ):
        """
        Inicializa la sesión de un formulario.

        Args:
            config: Documento de configuración (FormConfig o dict decodificado)
            initial_values: Valores iniciales; tienen prioridad sobre defaultValue
            on_change: Se llama con el snapshot de valores tras cada cambio
            on_submit: Se llama con el snapshot cuando el envío es aceptado
            handlers: Validadores custom y step guards de la aplicación
            settings: Opciones del motor

        Raises:
            ConfigurationError: Documento inválido o handler no registrado
        """
        self.config = load_config(config)
        self.settings = settings or EngineSettings()
        self.handlers = handlers or HandlerRegistry()
        self._on_change = on_change
        self._on_submit = on_submit

        self._fields: list[FormField] = self.config.all_fields()
        self._field_index: dict[str, FormField] = {f.id: f for f in self._fields}

        self.validator = FormValidator(self.handlers)
        self.validator.check_handlers(self._fields)

        self.navigator: Optional[WizardNavigator] = None
        if self.config.is_wizard:
            self.navigator = WizardNavigator(
                self.config.steps,
                handlers=self.handlers,
                submit_text=self.config.submit_button_text,
            )

        seed = {
            f.id: f.default_value for f in self._fields if f.default_value is not None
        }
        seed.update(initial_values or {})
        self._session = FormSession.seeded(seed)
        logger.debug(
            "Sesión iniciada para '%s' (%d campos)", self.config.id, len(self._fields)
        )

    # ------------------------------------------------------------------
    # Vistas de solo lectura
    # ------------------------------------------------------------------

    @property
    def fields(self) -> list[FormField]:
        return list(self._fields)

    @property
    def values(self) -> dict[str, Any]:
        return self._session.snapshot()

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._session.errors)

    @property
    def touched(self) -> frozenset[str]:
        return frozenset(self._session.touched)

    @property
    def visible_errors(self) -> dict[str, str]:
        """Errores de campos tocados (los únicos que se muestran)."""
        return self._session.visible_errors()

    @property
    def current_step(self) -> int:
        return self._session.current_step

    @property
    def progress(self) -> Optional[StepProgress]:
        if self.navigator is None:
            return None
        return self.navigator.progress(self._session)

    def get_field(self, field_id: str) -> Optional[FormField]:
        return self._field_index.get(field_id)

    def is_visible(self, field_id: str) -> bool:
        return is_visible(self._require_field(field_id), self._session.values)

    def is_enabled(self, field_id: str) -> bool:
        return is_enabled(self._require_field(field_id), self._session.values)

    def fields_for_current_step(self) -> list[FormField]:
        """Campos del paso actual (todos los campos en modo simple)."""
        if self.navigator is None:
            return self.fields
        return self.config.step_fields(self._session.current_step)

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------

    def change_field(self, field_id: str, value: Any) -> None:
        """Actualiza el valor y limpia el error del campo (optimista)."""
        if field_id not in self._field_index:
            logger.warning("Cambio en campo desconocido '%s'", field_id)
        self._session.set_value(field_id, value)
        self._session.clear_error(field_id)
        self._notify_change()

    def blur_field(self, field_id: str) -> Optional[str]:
        """
        Marca el campo como tocado y lo valida.

        Returns:
            Mensaje de error del campo o None
        """
        self._session.touch(field_id)
        fld = self._field_index.get(field_id)
        if fld is None:
            logger.warning("Blur en campo desconocido '%s'", field_id)
            return None

        values = self._session.values
        error = self.validator.validate_field(fld, values.get(field_id), values)
        if error:
            self._session.set_error(field_id, error)
        return error

    def submit(self) -> SubmitResult:
        """Valida todo el formulario y, si no hay errores, notifica el envío."""
        values = self._session.snapshot()
        fields = self._submission_fields(values)

        errors = self.validator.validate_form(fields, values)
        if errors:
            self._session.replace_errors(errors)
            self._session.touch_all(f.id for f in self._fields)
            logger.warning(
                "Envío rechazado para '%s': %d campos con error",
                self.config.id, len(errors),
            )
            return SubmitResult(errors=dict(errors))

        self._session.replace_errors({})
        data = values
        if not self.settings.validate_hidden_fields:
            kept = {f.id for f in fields}
            hidden = {f.id for f in self._fields} - kept
            data = {k: v for k, v in values.items() if k not in hidden}

        logger.info("Envío aceptado para '%s'", self.config.id)
        if self._on_submit is not None:
            self._on_submit(dict(data))

        if self.settings.reset_on_submit:
            self.reset()
        return SubmitResult(data=data)

    def reset(self) -> None:
        """Descarta la sesión y comienza una vacía."""
        self._session = FormSession()
        logger.debug("Sesión reiniciada para '%s'", self.config.id)
        self._notify_change()

    def next_step(self) -> tuple[StepResult, Optional[SubmitResult]]:
        """
        Avanza al siguiente paso del wizard.

        Returns:
            Tupla (resultado, envío); el envío solo existe si el resultado
            es StepResult.SUBMIT
        """
        result = self._require_navigator().next(self._session)
        if result == StepResult.SUBMIT:
            return result, self.submit()
        return result, None

    def previous_step(self) -> StepResult:
        return self._require_navigator().previous(self._session)

    # ------------------------------------------------------------------
    # Auxiliares
    # ------------------------------------------------------------------

    def _submission_fields(self, values: Mapping[str, Any]) -> list[FormField]:
        if self.settings.validate_hidden_fields:
            return list(self._fields)
        return visible_fields(self._fields, values)

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self._session.snapshot())

    def _require_field(self, field_id: str) -> FormField:
        fld = self._field_index.get(field_id)
        if fld is None:
            raise KeyError(f"Campo desconocido: '{field_id}'")
        return fld

    def _require_navigator(self) -> WizardNavigator:
        if self.navigator is None:
            raise RuntimeError("El formulario no es de tipo wizard")
        return self.navigator
