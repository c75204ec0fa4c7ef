"""Núcleo del intérprete de formularios."""

from jsonform.core.dependencies import (
    is_visible,
    is_enabled,
    visible_fields,
    values_equal,
)
from jsonform.core.handlers import HandlerRegistry
from jsonform.core.validation import (
    FormValidator,
    is_empty_value,
    is_valid_email,
)
from jsonform.core.state import FormSession
from jsonform.core.wizard import (
    StepResult,
    StepProgress,
    WizardNavigator,
)
from jsonform.core.orchestrator import FormOrchestrator, SubmitResult
from jsonform.core.values import coerce_value, format_field_value

__all__ = [
    # dependencias
    "is_visible",
    "is_enabled",
    "visible_fields",
    "values_equal",
    # validación
    "HandlerRegistry",
    "FormValidator",
    "is_empty_value",
    "is_valid_email",
    # estado y navegación
    "FormSession",
    "StepResult",
    "StepProgress",
    "WizardNavigator",
    # orquestador
    "FormOrchestrator",
    "SubmitResult",
    # valores
    "coerce_value",
    "format_field_value",
]
