"""
Resolución de dependencias entre campos.

Funciones puras: calculan si un campo es visible y si está habilitado según los
valores actuales de los campos de los que depende.
"""

from typing import Any, Iterable, Mapping

from jsonform.config import DependencyAction, FieldDependency, FormField


def values_equal(a: Any, b: Any) -> bool:
    """
    Igualdad estricta entre valores del formulario.

    Un bool nunca es igual a un número (True != 1); int y float se comparan
    numéricamente.
    """
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


def dependency_matches(dep: FieldDependency, values: Mapping[str, Any]) -> bool:
    """True si el valor actual del campo padre es igual al de la dependencia."""
    return values_equal(values.get(dep.field), dep.value)


def is_visible(field: FormField, values: Mapping[str, Any]) -> bool:
    """
    Visible si se cumplen todas las dependencias show/hide.

    Las dependencias enable/disable no afectan la visibilidad.
    """
    for dep in field.dependencies:
        if dep.action == DependencyAction.SHOW and not dependency_matches(dep, values):
            return False
        if dep.action == DependencyAction.HIDE and dependency_matches(dep, values):
            return False
    return True


def is_enabled(field: FormField, values: Mapping[str, Any]) -> bool:
    """
    Habilitado salvo que esté deshabilitado estáticamente, que se cumpla
    alguna dependencia 'disable' o que no se cumpla alguna 'enable'.
    """
    if field.disabled:
        return False
    for dep in field.dependencies:
        matches = dependency_matches(dep, values)
        if dep.action == DependencyAction.DISABLE and matches:
            return False
        if dep.action == DependencyAction.ENABLE and not matches:
            return False
    return True


def visible_fields(fields: Iterable[FormField], values: Mapping[str, Any]) -> list[FormField]:
    """Filtra los campos visibles conservando el orden."""
    return [f for f in fields if is_visible(f, values)]
