"""CancelEvent command handler.

Cancels a Draft or Published event. Re-cancelling succeeds; cancelling a
Finalized event fails with InvalidStateError.
"""

from src.application.commands.handlers.event_transition_handler import (
    EventTransitionHandler,
)
from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Event


class CancelEventHandler(EventTransitionHandler):
    """Handler for CancelEvent command."""

    operation = "cancel"
    completed_log = "event_cancelled"

    def _apply(self, event: Event) -> Result[None, DomainError]:
        return event.cancel()
