"""InMemoryEventRepository - in-process implementation of EventRepository.

Adapter for hexagonal architecture.
Maps between domain Event aggregates and immutable EventRecord snapshots,
so every load rebuilds an independent aggregate, exactly like a database
round trip. Pending domain events are never stored.

Concurrency:
    Last-writer-wins. There is no version check on update().
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.domain.entities.event import Event
from src.domain.entities.section import Section
from src.domain.value_objects.event_date import EventDate
from src.domain.value_objects.event_duration import EventDuration
from src.domain.value_objects.event_state import EventState
from src.domain.value_objects.price import Price


@dataclass(frozen=True, slots=True, kw_only=True)
class SectionRecord:
    id: UUID
    name: str
    capacity: int
    price: Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class EventRecord:
    """Stored form of an Event (plain values only)."""

    id: UUID
    name: str
    description: str
    date: datetime
    duration_hours: int
    duration_minutes: int
    state: str
    sections: tuple[SectionRecord, ...]
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None


class InMemoryEventRepository:
    """Dictionary-backed implementation of EventRepository protocol.

    This class does NOT inherit from EventRepository protocol (Protocol uses
    structural typing).

    Example:
        >>> repo = InMemoryEventRepository()
        >>> await repo.add(event)
        >>> loaded = await repo.get_by_id(event.id)
        >>> loaded is event
        False
    """

    def __init__(self) -> None:
        self._records: dict[UUID, EventRecord] = {}

    async def add(self, event: Event) -> None:
        """Store a new Event.

        Raises:
            ValueError: If an Event with the same id is already stored.
        """
        if event.id in self._records:
            raise ValueError(f"Event {event.id} already exists")
        self._records[event.id] = self._to_record(event)

    async def get_by_id(self, event_id: UUID) -> Event | None:
        record = self._records.get(event_id)
        if record is None:
            return None
        return self._to_domain(record)

    async def update(self, event: Event) -> None:
        """Replace the stored Event.

        Raises:
            LookupError: If no Event with this id is stored.
        """
        if event.id not in self._records:
            raise LookupError(f"Event {event.id} does not exist")
        self._records[event.id] = self._to_record(event)

    def __len__(self) -> int:
        return len(self._records)

    @staticmethod
    def _to_record(event: Event) -> EventRecord:
        return EventRecord(
            id=event.id,
            name=event.name,
            description=event.description,
            date=event.date.value,
            duration_hours=event.duration.hours,
            duration_minutes=event.duration.minutes,
            state=event.state.value,
            sections=tuple(
                SectionRecord(
                    id=section.id,
                    name=section.name,
                    capacity=section.capacity,
                    price=section.price.amount,
                )
                for section in event.sections
            ),
            created_at=event.created_at,
            updated_at=event.updated_at,
            published_at=event.published_at,
        )

    @staticmethod
    def _to_domain(record: EventRecord) -> Event:
        """Rebuild an aggregate from its record.

        A stored event may be dated before today, so its date is restored
        without the creation-time check.
        """
        return Event(
            id=record.id,
            name=record.name,
            description=record.description,
            date=EventDate.restore(record.date),
            duration=EventDuration(
                hours=record.duration_hours, minutes=record.duration_minutes
            ),
            state=EventState(record.state),
            sections=[
                Section(
                    id=section.id,
                    name=section.name,
                    capacity=section.capacity,
                    price=Price(section.price),
                )
                for section in record.sections
            ],
            created_at=record.created_at,
            updated_at=record.updated_at,
            published_at=record.published_at,
        )
