"""
Motor de validación de campos.

Evalúa las reglas de un campo en orden de declaración; la primera regla que
falla determina el error (un campo tiene como máximo un error activo).
"""

import logging
import re
from typing import Any, Iterable, Mapping, Optional

from jsonform.config import FormField, RuleType, ValidationRule
from jsonform.core.handlers import HandlerRegistry

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_empty_value(value: Any) -> bool:
    """Ausente para la regla 'required': None, "" o secuencia vacía."""
    if value is None or value == "":
        return True
    if isinstance(value, (list, tuple, set, frozenset)) and len(value) == 0:
        return True
    return False


def is_valid_email(value: Any) -> bool:
    """Forma local@dominio.tld."""
    return bool(EMAIL_RE.match(str(value)))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_present(value: Any) -> bool:
    # min/max solo ignoran None y ""; email/pattern ignoran cualquier valor falso
    return value is not None and value != ""


class FormValidator:
    """Valida campos y formularios completos contra sus reglas."""

    def __init__(self, handlers: Optional[HandlerRegistry] = None):
        self.handlers = handlers or HandlerRegistry()

    def check_handlers(self, fields: Iterable[FormField]) -> None:
        """
        Verifica que todas las reglas custom tengan handler.

        Raises:
            ConfigurationError: Si alguna regla usa un nombre no registrado
        """
        for fld in fields:
            for rule in fld.rules:
                if rule.type == RuleType.CUSTOM:
                    self.handlers.resolve_validator(rule.value)

    def validate_rule(
        self, rule: ValidationRule, value: Any, form_data: Mapping[str, Any]
    ) -> Optional[str]:
        """Evalúa una regla. Retorna el mensaje de error o None."""
        if rule.type == RuleType.REQUIRED:
            if is_empty_value(value):
                return rule.message

        elif rule.type == RuleType.EMAIL:
            if value and not is_valid_email(value):
                return rule.message

        elif rule.type == RuleType.MIN:
            if _is_present(value):
                if isinstance(value, str) and len(value) < rule.value:
                    return rule.message
                if _is_number(value) and value < rule.value:
                    return rule.message

        elif rule.type == RuleType.MAX:
            if _is_present(value):
                if isinstance(value, str) and len(value) > rule.value:
                    return rule.message
                if _is_number(value) and value > rule.value:
                    return rule.message

        elif rule.type == RuleType.PATTERN:
            if value and not re.search(rule.value, str(value)):
                return rule.message

        elif rule.type == RuleType.CUSTOM:
            fn = self.handlers.resolve_validator(rule.value)
            result = fn(value, dict(form_data))
            if result is not True:
                return result if isinstance(result, str) else rule.message

        return None

    def validate_field(
        self, field: FormField, value: Any, form_data: Mapping[str, Any]
    ) -> Optional[str]:
        """Valida el valor de un campo; primera regla fallida gana."""
        for rule in field.rules:
            error = self.validate_rule(rule, value, form_data)
            if error:
                logger.debug("Campo '%s' falla regla '%s'", field.id, rule.type.value)
                return error
        return None

    def validate_form(
        self, fields: Iterable[FormField], form_data: Mapping[str, Any]
    ) -> dict[str, str]:
        """Valida todos los campos y retorna solo los que tienen error."""
        errors: dict[str, str] = {}
        for fld in fields:
            error = self.validate_field(fld, form_data.get(fld.id), form_data)
            if error:
                errors[fld.id] = error
        return errors
