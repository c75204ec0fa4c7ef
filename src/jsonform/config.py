"""Modelos Pydantic para el documento de configuración del formulario."""

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from jsonform.exceptions import ConfigurationError


class FormType(str, Enum):
    """Modo de presentación del formulario."""
    SIMPLE = "simple"
    WIZARD = "wizard"


class HttpMethod(str, Enum):
    """Método HTTP del envío (dato opaco para el núcleo)."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class FieldType(str, Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    PHONE = "phone"
    SELECT = "select"
    MULTISELECT = "multiselect"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    TEXTAREA = "textarea"
    DATE = "date"
    SWITCH = "switch"


# Tipos que necesitan lista de opciones
OPTION_FIELD_TYPES = (FieldType.SELECT, FieldType.MULTISELECT, FieldType.RADIO)


class RuleType(str, Enum):
    """Tipos de regla de validación."""
    REQUIRED = "required"
    EMAIL = "email"
    MIN = "min"
    MAX = "max"
    PATTERN = "pattern"
    CUSTOM = "custom"


class DependencyAction(str, Enum):
    """Acción de una dependencia entre campos."""
    SHOW = "show"
    HIDE = "hide"
    ENABLE = "enable"
    DISABLE = "disable"


class BannerType(str, Enum):
    """Tipos de banner informativo."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class _ConfigModel(BaseModel):
    """Base común: acepta claves camelCase del JSON y nombres Python."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ============================================================================
# Campos y reglas
# ============================================================================

class FieldOption(_ConfigModel):
    """Par valor/etiqueta para select, multiselect y radio."""
    value: Any
    label: str = ""

    @model_validator(mode="after")
    def _default_label(self) -> "FieldOption":
        if not self.label:
            self.label = str(self.value)
        return self


class ValidationRule(_ConfigModel):
    """Regla de validación de un campo."""
    type: RuleType
    value: Any = None  # Cota numérica, regex o handler (nombre o callable)
    message: str = Field(..., description="Mensaje mostrado al usuario")

    @model_validator(mode="after")
    def _check_value(self) -> "ValidationRule":
        if self.type in (RuleType.MIN, RuleType.MAX):
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise ValueError(
                    f"La regla '{self.type.value}' requiere un valor numérico"
                )
        elif self.type == RuleType.PATTERN:
            if not isinstance(self.value, str):
                raise ValueError("La regla 'pattern' requiere una expresión regular")
            try:
                re.compile(self.value)
            except re.error as e:
                raise ValueError(f"Expresión regular inválida '{self.value}': {e}")
        elif self.type == RuleType.CUSTOM:
            if not (isinstance(self.value, str) and self.value) and not callable(self.value):
                raise ValueError(
                    "La regla 'custom' requiere el nombre de un handler registrado"
                )
        return self


class FieldDependency(_ConfigModel):
    """Hace depender la visibilidad o habilitación de otro campo."""
    field: str
    value: Any = None
    action: DependencyAction


class FormField(_ConfigModel):
    """Definición de un campo del formulario."""
    id: str = Field(..., min_length=1)
    type: FieldType
    label: str = ""
    placeholder: Optional[str] = None
    required: bool = False
    validation: list[ValidationRule] = Field(default_factory=list)
    options: Optional[list[FieldOption]] = None
    default_value: Any = Field(None, alias="defaultValue")
    disabled: bool = False
    dependencies: list[FieldDependency] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_options(self) -> "FormField":
        if self.type in OPTION_FIELD_TYPES and not self.options:
            raise ValueError(
                f"El campo '{self.id}' de tipo {self.type.value} requiere opciones"
            )
        return self

    @property
    def rules(self) -> list[ValidationRule]:
        """Reglas en orden de declaración."""
        return self.validation

    def option_label(self, value: Any) -> Optional[str]:
        """Etiqueta de la opción con ese valor, si existe."""
        for opt in self.options or []:
            if opt.value == value:
                return opt.label
        return None


class FormGroup(_ConfigModel):
    """Grupo de campos que se muestran juntos."""
    id: str = Field(..., min_length=1)
    title: str = ""
    subtitle: Optional[str] = None
    fields: list[FormField] = Field(default_factory=list)
    # Solo presentación, nunca forman parte del estado de la sesión
    collapsible: bool = False
    default_collapsed: bool = Field(False, alias="defaultCollapsed")


class WizardStep(_ConfigModel):
    """Paso del wizard: conjunto de grupos con condición de avance."""
    id: str = Field(..., min_length=1)
    title: str = ""
    subtitle: Optional[str] = None
    groups: list[FormGroup] = Field(default_factory=list)
    next_button_text: Optional[str] = Field(None, alias="nextButtonText")
    previous_button_text: Optional[str] = Field(None, alias="previousButtonText")
    # Nombre de un step guard registrado o callable (values) -> bool
    can_go_next: Any = Field(None, alias="canGoNext")

    @field_validator("can_go_next")
    @classmethod
    def _check_guard(cls, v: Any) -> Any:
        if v is None or callable(v) or (isinstance(v, str) and v):
            return v
        raise ValueError("canGoNext debe ser el nombre de un step guard registrado")

    @property
    def fields(self) -> list[FormField]:
        return [f for group in self.groups for f in group.fields]


class FormBanner(_ConfigModel):
    """Banner informativo mostrado sobre el formulario."""
    id: str
    type: BannerType = BannerType.INFO
    title: Optional[str] = None
    message: str
    dismissible: bool = False


# ============================================================================
# Documento completo
# ============================================================================

class FormConfig(_ConfigModel):
    """Documento de configuración del formulario (inmutable por sesión)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    subtitle: Optional[str] = None
    type: FormType
    endpoint: str = ""
    method: HttpMethod = HttpMethod.POST
    headers: dict[str, Any] = Field(default_factory=dict)
    banners: list[FormBanner] = Field(default_factory=list)
    groups: Optional[list[FormGroup]] = None
    steps: Optional[list[WizardStep]] = None
    submit_button_text: Optional[str] = Field(None, alias="submitButtonText")
    reset_button_text: Optional[str] = Field(None, alias="resetButtonText")
    show_reset_button: bool = Field(False, alias="showResetButton")
    callbacks: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_structure(self) -> "FormConfig":
        if self.type == FormType.SIMPLE:
            if self.groups is None:
                raise ValueError("Un formulario 'simple' requiere 'groups'")
            if self.steps is not None:
                raise ValueError("Un formulario 'simple' no admite 'steps'")
        else:
            if not self.steps:
                raise ValueError("Un formulario 'wizard' requiere 'steps' no vacío")
            if self.groups is not None:
                raise ValueError("Un formulario 'wizard' no admite 'groups'")

        problems = []
        problems += _duplicates("campo", [f.id for f in self.all_fields()])
        problems += _duplicates("grupo", [g.id for g in self.all_groups()])
        problems += _duplicates("paso", [s.id for s in self.steps or []])

        known = {f.id for f in self.all_fields()}
        for fld in self.all_fields():
            for dep in fld.dependencies:
                if dep.field not in known:
                    problems.append(
                        f"El campo '{fld.id}' depende de '{dep.field}', que no existe"
                    )
        if problems:
            raise ValueError("; ".join(problems))
        return self

    @property
    def is_wizard(self) -> bool:
        return self.type == FormType.WIZARD

    def all_groups(self) -> list[FormGroup]:
        """Grupos en orden de documento (de todos los pasos en modo wizard)."""
        if self.is_wizard:
            return [g for step in self.steps or [] for g in step.groups]
        return list(self.groups or [])

    def all_fields(self) -> list[FormField]:
        """Lista aplanada de campos en orden de documento."""
        return [f for group in self.all_groups() for f in group.fields]

    def get_field(self, field_id: str) -> Optional[FormField]:
        """Obtiene un campo por su id (único en todo el documento)."""
        for f in self.all_fields():
            if f.id == field_id:
                return f
        return None

    def step_fields(self, index: int) -> list[FormField]:
        """Campos del paso indicado (solo modo wizard)."""
        if not self.is_wizard:
            raise RuntimeError("El formulario no es de tipo wizard")
        return self.steps[index].fields


def _duplicates(kind: str, ids: list[str]) -> list[str]:
    seen = set()
    dup = []
    for i in ids:
        if i in seen and i not in dup:
            dup.append(i)
        seen.add(i)
    return [f"Id de {kind} duplicado: '{i}'" for i in dup]


# ============================================================================
# Configuración del motor
# ============================================================================

class EngineSettings(BaseModel):
    """Opciones de comportamiento del orquestador."""
    validate_hidden_fields: bool = Field(
        default=True,
        description="Validar y enviar campos ocultos por dependencias",
    )
    reset_on_submit: bool = Field(
        default=False,
        description="Iniciar una sesión vacía después de un envío aceptado",
    )


# ============================================================================
# Carga
# ============================================================================

def _format_validation_error(exc: ValidationError) -> list[str]:
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "")
        # Pydantic antepone "Value error, " a los ValueError propios
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        problems.append(f"{loc}: {msg}" if loc else msg)
    return problems


def load_config(data: Union[dict, FormConfig]) -> FormConfig:
    """
    Construye un FormConfig a partir de un documento ya decodificado.

    Raises:
        ConfigurationError: Si el documento no es una configuración válida
    """
    if isinstance(data, FormConfig):
        return data
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"La configuración debe ser un objeto JSON (recibido: {type(data).__name__})"
        )
    try:
        return FormConfig.model_validate(data)
    except ValidationError as e:
        problems = _format_validation_error(e)
        raise ConfigurationError("Configuración de formulario inválida", problems) from e


def load_config_file(path: Union[str, Path]) -> FormConfig:
    """Lee y valida un archivo JSON de configuración."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"No se encontró el archivo: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"JSON inválido en {path}: {e}") from e
    return load_config(data)
