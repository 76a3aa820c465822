"""Event lifecycle domain events.

Emitted by the Event aggregate on user-facing milestones:
- EventCreated: a Draft event was created
- EventPublished: a Draft event went on sale

Finalization and cancellation do not emit domain events.

Wire format (see DomainEventCodec):
    routing key  = lowercase class name ("eventcreated", "eventpublished")
    message body = JSON object with camelCase keys
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class EventCreated(DomainEvent):
    """A new Event was created in Draft state.

    Attributes:
        event_id: Identifier of the created Event.
        name: Name of the created Event.
    """

    event_id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class EventPublished(DomainEvent):
    """A Draft Event was published.

    Attributes:
        event_id: Identifier of the published Event.
    """

    event_id: UUID
