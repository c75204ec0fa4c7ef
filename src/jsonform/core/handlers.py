"""
Registro de handlers provistos por la aplicación anfitriona.

El documento JSON no puede contener código: las reglas 'custom' y los
'canGoNext' de los pasos guardan un nombre simbólico, y la aplicación registra
aquí la función correspondiente antes de iniciar la sesión.
"""

from typing import Any, Callable, Optional, Union

from jsonform.exceptions import ConfigurationError


# (value, form_data) -> True | mensaje
CustomValidator = Callable[[Any, dict], Union[bool, str]]
# (values) -> bool
StepGuard = Callable[[dict], bool]


class HandlerRegistry:
    """Mapa de nombres a validadores custom y step guards."""

    def __init__(
        self,
        validators: Optional[dict[str, CustomValidator]] = None,
        step_guards: Optional[dict[str, StepGuard]] = None,
    ):
        self._validators: dict[str, CustomValidator] = dict(validators or {})
        self._step_guards: dict[str, StepGuard] = dict(step_guards or {})

    def register_validator(self, name: str, fn: CustomValidator) -> None:
        self._validators[name] = fn

    def register_step_guard(self, name: str, fn: StepGuard) -> None:
        self._step_guards[name] = fn

    def validator(self, name: str) -> CustomValidator:
        """Decorador para registrar un validador custom."""
        def decorator(fn: CustomValidator) -> CustomValidator:
            self.register_validator(name, fn)
            return fn
        return decorator

    def step_guard(self, name: str) -> StepGuard:
        """Decorador para registrar un step guard."""
        def decorator(fn: StepGuard) -> StepGuard:
            self.register_step_guard(name, fn)
            return fn
        return decorator

    def resolve_validator(self, ref: Union[str, CustomValidator]) -> CustomValidator:
        """Obtiene el validador de una regla custom (nombre o callable)."""
        if callable(ref):
            return ref
        try:
            return self._validators[ref]
        except KeyError:
            raise ConfigurationError(f"Validador custom no registrado: '{ref}'") from None

    def resolve_step_guard(self, ref: Union[str, StepGuard]) -> StepGuard:
        """Obtiene el step guard de un paso (nombre o callable)."""
        if callable(ref):
            return ref
        try:
            return self._step_guards[ref]
        except KeyError:
            raise ConfigurationError(f"Step guard no registrado: '{ref}'") from None

    @property
    def validator_names(self) -> list[str]:
        return sorted(self._validators)

    @property
    def step_guard_names(self) -> list[str]:
        return sorted(self._step_guards)
