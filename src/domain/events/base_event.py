"""Base domain event class.

Domain events are immutable records of facts that happened to an Event
aggregate. They are named in past tense (EventCreated, EventPublished),
accumulated by the aggregate while it changes, and drained by the command
handler after the aggregate has been persisted.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated message_id (UUID) for consumer-side deduplication
    - occurred_at timestamp (UTC) for event ordering
    - Never persisted: lost if the process stops between persist and publish

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class EventPublished(DomainEvent):
    ...     event_id: UUID
    >>>
    >>> fact = EventPublished(event_id=event.id)
    >>> fact.message_id   # Auto-generated UUID
    >>> fact.occurred_at  # Auto-generated UTC timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (EventPublished, NOT PublishEvent)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)

    Attributes:
        message_id: Unique identifier of this fact. Consumers receive domain
            events at least once and use it to deduplicate.
        occurred_at: When the fact occurred (UTC).

    Notes:
        - The business Event's identifier is a field of each subclass
          (event_id); message_id identifies the fact itself.
        - Events are drained and published AFTER the aggregate is persisted.
    """

    message_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
