"""PublishEvent command handler.

Draft → Published. Emits EventPublished, delivered to the message bus
after the aggregate is persisted.
"""

from src.application.commands.handlers.event_transition_handler import (
    EventTransitionHandler,
)
from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Event


class PublishEventHandler(EventTransitionHandler):
    """Handler for PublishEvent command."""

    operation = "publish"
    completed_log = "event_published"

    def _apply(self, event: Event) -> Result[None, DomainError]:
        return event.publish()
