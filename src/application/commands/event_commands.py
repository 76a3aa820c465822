"""Event lifecycle commands (CQRS write operations).

Commands represent user intent to change Event state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Validators check them before any aggregate is touched
- Handlers execute business logic and return Result types
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SectionInput:
    """One section of a CreateEvent request.

    Attributes:
        name: Section name (non-empty, unique within the event).
        capacity: Number of seats (positive).
        price: Ticket price (non-negative).
    """

    name: str
    capacity: int
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class CreateEvent:
    """Create a new Event in Draft state.

    Attributes:
        name: Event name.
        description: Free text (None stored as "").
        date: When the event takes place (today or later).
        duration_hours: Whole hours.
        duration_minutes: Minutes.
        sections: At least one section.

    Example:
        >>> command = CreateEvent(
        ...     name="Rock Concert",
        ...     description="Open air",
        ...     date=datetime.now(UTC) + timedelta(days=30),
        ...     duration_hours=3,
        ...     duration_minutes=0,
        ...     sections=(SectionInput(name="General", capacity=500, price=Decimal("50.00")),),
        ... )
        >>> result = await handler.handle(command)  # Success(value=event_id)
    """

    name: str
    description: str | None = None
    date: datetime
    duration_hours: int
    duration_minutes: int
    sections: tuple[SectionInput, ...] = field(default_factory=tuple)


@dataclass(frozen=True, kw_only=True)
class PublishEvent:
    """Publish a Draft Event.

    Attributes:
        event_id: Event identifier.
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class FinalizeEvent:
    """Finalize a Published Event.

    Attributes:
        event_id: Event identifier.
    """

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class CancelEvent:
    """Cancel a Draft or Published Event.

    Attributes:
        event_id: Event identifier.
    """

    event_id: UUID
