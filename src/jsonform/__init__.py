"""
jsonform - Intérprete de formularios declarativos en JSON.

Evalúa la configuración de un formulario (campos, grupos, pasos, validación y
visibilidad condicional) contra la entrada del usuario.
"""

from jsonform.config import (
    FormConfig,
    FormGroup,
    FormField,
    FormBanner,
    WizardStep,
    ValidationRule,
    FieldDependency,
    FieldOption,
    FieldType,
    FormType,
    RuleType,
    DependencyAction,
    EngineSettings,
    load_config,
    load_config_file,
)
from jsonform.exceptions import ConfigurationError
from jsonform.core import (
    FormOrchestrator,
    SubmitResult,
    HandlerRegistry,
    FormValidator,
    FormSession,
    WizardNavigator,
    StepResult,
    StepProgress,
    is_visible,
    is_enabled,
)

__version__ = "0.1.0"

__all__ = [
    "FormConfig",
    "FormGroup",
    "FormField",
    "FormBanner",
    "WizardStep",
    "ValidationRule",
    "FieldDependency",
    "FieldOption",
    "FieldType",
    "FormType",
    "RuleType",
    "DependencyAction",
    "EngineSettings",
    "load_config",
    "load_config_file",
    "ConfigurationError",
    "FormOrchestrator",
    "SubmitResult",
    "HandlerRegistry",
    "FormValidator",
    "FormSession",
    "WizardNavigator",
    "StepResult",
    "StepProgress",
    "is_visible",
    "is_enabled",
]
