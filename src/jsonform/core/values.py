"""
Conversión y formateo de valores de campos.
"""

from typing import Any

from jsonform.config import FieldType, FormField

TRUE_WORDS = {"true", "1", "si", "sí", "s", "yes", "y", "on"}
FALSE_WORDS = {"false", "0", "no", "n", "off", ""}


def coerce_value(field: FormField, raw: Any) -> Any:
    """
    Convierte una entrada de texto al tipo del campo.

    Los campos numéricos usan 0 cuando el texto no es un número.
    """
    if field.type == FieldType.NUMBER:
        if isinstance(raw, bool):
            return int(raw)
        if isinstance(raw, (int, float)):
            return raw
        try:
            val = float(str(raw).strip())
        except ValueError:
            return 0
        if val != val:  # NaN
            return 0
        return int(val) if val.is_integer() else val

    if field.type in (FieldType.CHECKBOX, FieldType.SWITCH):
        if isinstance(raw, str):
            word = raw.strip().lower()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
        return bool(raw)

    if field.type == FieldType.MULTISELECT and isinstance(raw, str):
        return [v.strip() for v in raw.split(",") if v.strip()]

    return raw


def format_field_value(field: FormField, value: Any) -> str:
    """Formatea el valor de un campo para mostrar."""
    if value is None or value == "":
        return "-"

    if field.type in (FieldType.SELECT, FieldType.RADIO):
        label = field.option_label(value)
        return label if label is not None else str(value)

    if field.type == FieldType.MULTISELECT:
        if isinstance(value, (list, tuple)):
            names = []
            for v in value:
                label = field.option_label(v)
                names.append(label if label is not None else str(v))
            return ", ".join(names) if names else "-"
        return str(value)

    if field.type in (FieldType.CHECKBOX, FieldType.SWITCH):
        return "Sí" if value else "No"

    if field.type == FieldType.PASSWORD:
        return "*" * len(str(value))

    if field.type == FieldType.NUMBER and isinstance(value, float):
        return f"{value:g}"

    return str(value)
