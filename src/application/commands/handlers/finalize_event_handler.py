"""FinalizeEvent command handler (Published → Finalized, no domain event)."""

from src.application.commands.handlers.event_transition_handler import (
    EventTransitionHandler,
)
from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Event


class FinalizeEventHandler(EventTransitionHandler):
    """Handler for FinalizeEvent command."""

    operation = "finalize"
    completed_log = "event_finalized"

    def _apply(self, event: Event) -> Result[None, DomainError]:
        return event.finalize()
