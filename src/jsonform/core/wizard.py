"""
Navegación entre pasos del wizard.

Máquina de estados sobre la lista ordenada de pasos: solo transiciones a pasos
adyacentes, y el avance queda condicionado por el step guard del paso o, por
defecto, por la presencia de valor en sus campos requeridos.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from jsonform.config import WizardStep
from jsonform.core.handlers import HandlerRegistry, StepGuard
from jsonform.core.state import FormSession

logger = logging.getLogger(__name__)

DEFAULT_NEXT_TEXT = "Siguiente"
DEFAULT_PREVIOUS_TEXT = "Anterior"
DEFAULT_SUBMIT_TEXT = "Enviar"


class StepResult(Enum):
    """Resultado de una acción de navegación."""
    NEXT = "next"         # Avanzó al siguiente paso
    BACK = "back"         # Volvió al paso anterior
    SUBMIT = "submit"     # Último paso: se solicita el envío
    BLOCKED = "blocked"   # Acción no permitida, sin cambios


@dataclass(frozen=True)
class StepProgress:
    """Datos del paso actual para mostrar el progreso."""
    number: int  # 1-based
    total: int
    title: str
    subtitle: Optional[str]
    next_label: str
    previous_label: str
    can_go_back: bool
    can_go_next: bool

    @property
    def is_last(self) -> bool:
        return self.number == self.total


class WizardNavigator:
    """Controlador de navegación del wizard."""

    def __init__(
        self,
        steps: list[WizardStep],
        handlers: Optional[HandlerRegistry] = None,
        submit_text: Optional[str] = None,
    ):
        if not steps:
            raise ValueError("El wizard necesita al menos un paso")
        self.steps = steps
        self.submit_text = submit_text or DEFAULT_SUBMIT_TEXT
        handlers = handlers or HandlerRegistry()
        # Resolver guards al construir: un nombre desconocido falla de inmediato
        self._guards: list[Optional[StepGuard]] = [
            handlers.resolve_step_guard(s.can_go_next) if s.can_go_next is not None else None
            for s in steps
        ]

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def current(self, session: FormSession) -> WizardStep:
        return self.steps[session.current_step]

    def is_first(self, session: FormSession) -> bool:
        return session.current_step == 0

    def is_last(self, session: FormSession) -> bool:
        return session.current_step == self.step_count - 1

    def can_go_next(self, session: FormSession) -> bool:
        """Step guard del paso o, por defecto, campos requeridos con valor."""
        guard = self._guards[session.current_step]
        values = session.snapshot()
        if guard is not None:
            return bool(guard(values))

        for fld in self.current(session).fields:
            if fld.required and values.get(fld.id) in (None, ""):
                return False
        return True

    def next(self, session: FormSession) -> StepResult:
        """Avanza un paso; en el último paso solicita el envío."""
        if not self.can_go_next(session):
            logger.debug("Avance bloqueado en paso %d", session.current_step)
            return StepResult.BLOCKED
        if self.is_last(session):
            return StepResult.SUBMIT
        session.current_step += 1
        logger.debug("Avanza a paso %d", session.current_step)
        return StepResult.NEXT

    def previous(self, session: FormSession) -> StepResult:
        """Retrocede un paso. Nunca valida."""
        if self.is_first(session):
            return StepResult.BLOCKED
        session.current_step -= 1
        logger.debug("Vuelve a paso %d", session.current_step)
        return StepResult.BACK

    def progress(self, session: FormSession) -> StepProgress:
        step = self.current(session)
        if self.is_last(session):
            next_label = self.submit_text
        else:
            next_label = step.next_button_text or DEFAULT_NEXT_TEXT
        return StepProgress(
            number=session.current_step + 1,
            total=self.step_count,
            title=step.title,
            subtitle=step.subtitle,
            next_label=next_label,
            previous_label=step.previous_button_text or DEFAULT_PREVIOUS_TEXT,
            can_go_back=not self.is_first(session),
            can_go_next=self.can_go_next(session),
        )
