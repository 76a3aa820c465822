"""Event aggregate root.

Represents a scheduled event (concert, conference...) composed of priced
Sections, and owns its lifecycle state machine.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction errors raise NullValueError / InvalidArgumentError
    - State transitions return Result types (railway-oriented programming)
    - Collects domain events; the command handler drains and clears them
      after the aggregate has been persisted

State Machine:
    DRAFT → PUBLISHED → FINALIZED
    DRAFT/PUBLISHED → CANCELLED

Usage:
    event = Event.create(
        name="Rock Concert",
        description="Open air",
        date=datetime.now(UTC) + timedelta(days=30),
        duration=EventDuration(hours=3, minutes=0),
        sections=[Section(name="General", capacity=500, price=Price("50.00"))],
    )

    match event.publish():
        case Success():
            await repository.update(event)
        case Failure(error=error):
            print(error.message)  # names the current state
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Self
from uuid import UUID

from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    InvalidStateError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.section import Section
from src.domain.errors import EventError, InvalidArgumentError, NullValueError
from src.domain.events.base_event import DomainEvent
from src.domain.events.event_lifecycle_events import EventCreated, EventPublished
from src.domain.value_objects.event_date import EventDate
from src.domain.value_objects.event_duration import EventDuration
from src.domain.value_objects.event_state import EventState


class Event:
    """Event aggregate root.

    The only way to change an Event is through its methods. Every failing
    method leaves the aggregate exactly as it was (no partial mutation).

    Invariants:
        - At least one Section at all times.
        - Draft is the unique initial state; Finalized and Cancelled are
          terminal (Cancelled may be re-applied).
        - Section ids and names are unique when added via add_section().
          Sections passed to create() are stored verbatim.

    Thread Safety:
        Not thread-safe. One instance is mutated by one request at a time;
        cross-request consistency belongs to the repository.

    Attributes:
        id: Unique event identifier.
        name: Event name (non-empty).
        description: Free text description.
        date: When the event takes place.
        duration: How long it lasts.
        state: Current lifecycle state.
        sections: Read-only view of the sections, in insertion order.
        domain_events: Read-only snapshot of pending domain events.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
        published_at: When the event was published (None until then).
    """

    def __init__(
        self,
        *,
        id: UUID,
        name: str,
        description: str,
        date: EventDate,
        duration: EventDuration,
        state: EventState,
        sections: Iterable[Section],
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        published_at: datetime | None = None,
    ) -> None:
        """Rehydrate an Event from already-validated parts.

        New events must be built with Event.create(); this constructor is
        for repositories restoring a stored aggregate. It starts with an
        empty domain event buffer.

        Raises:
            InvalidArgumentError: If sections is empty.
        """
        sections = list(sections)
        if not sections:
            raise InvalidArgumentError("sections", EventError.NO_SECTIONS)

        now = datetime.now(UTC)
        self._id = id
        self._name = name
        self._description = description
        self._date = date
        self._duration = duration
        self._state = state
        self._sections: list[Section] = sections
        self._domain_events: list[DomainEvent] = []
        self._created_at = created_at or now
        self._updated_at = updated_at or now
        self._published_at = published_at

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None,
        date: datetime | EventDate,
        duration: EventDuration,
        sections: Iterable[Section] | None,
    ) -> Self:
        """Create a new Event in Draft state.

        All arguments are checked before anything is allocated, so a failure
        never leaves a partially built aggregate behind.

        Args:
            name: Event name. Must not be None or blank.
            description: Description (None is stored as "").
            date: Event timestamp or EventDate; must not be in the past.
            duration: Event duration.
            sections: At least one section, stored verbatim (no duplicate check).

        Returns:
            New Event with one pending EventCreated domain event.

        Raises:
            NullValueError: If name, date, duration or sections is None, or if
                any section is None.
            InvalidArgumentError: If name is blank, date is in the past, or
                sections is empty.
        """
        if name is None:
            raise NullValueError("name", EventError.NAME_REQUIRED)
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("name", EventError.EMPTY_NAME)

        if sections is None:
            raise NullValueError("sections", EventError.SECTIONS_REQUIRED)
        section_list = list(sections)
        if not section_list:
            raise InvalidArgumentError("sections", EventError.NO_SECTIONS)
        if any(section is None for section in section_list):
            raise NullValueError("sections", EventError.SECTION_REQUIRED)

        # A restored EventDate skipped the past-date check
        event_date = EventDate(date.value if isinstance(date, EventDate) else date)

        if duration is None:
            raise NullValueError("duration", EventError.DURATION_REQUIRED)

        event = cls(
            id=uuid7(),
            name=name,
            description=description or "",
            date=event_date,
            duration=duration,
            state=EventState.draft(),
            sections=section_list,
        )
        event._record(EventCreated(event_id=event.id, name=event.name))
        return event

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def date(self) -> EventDate:
        return self._date

    @property
    def duration(self) -> EventDuration:
        return self._duration

    @property
    def state(self) -> EventState:
        return self._state

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def published_at(self) -> datetime | None:
        return self._published_at

    @property
    def total_capacity(self) -> int:
        """Sum of section capacities."""
        return sum(section.capacity for section in self._sections)

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def publish(self) -> Result[None, InvalidStateError]:
        """Transition Draft → Published.

        Returns:
            Success(None): Published; one EventPublished is pending.
            Failure(InvalidStateError): Event is not in Draft state.
        """
        target = EventState.published()
        if not self._state.can_transition_to(target):
            return Failure(
                error=self._invalid_state("publish", EventError.CANNOT_PUBLISH)
            )

        now = datetime.now(UTC)
        self._state = target
        self._published_at = now
        self._updated_at = now
        self._record(EventPublished(event_id=self._id))
        return Success(value=None)

    def finalize(self) -> Result[None, InvalidStateError]:
        """Transition Published → Finalized.

        No domain event is emitted for this transition.

        Returns:
            Success(None): Finalized.
            Failure(InvalidStateError): Event is not in Published state.
        """
        target = EventState.finalized()
        if not self._state.can_transition_to(target):
            return Failure(
                error=self._invalid_state("finalize", EventError.CANNOT_FINALIZE)
            )

        self._state = target
        self._updated_at = datetime.now(UTC)
        return Success(value=None)

    def cancel(self) -> Result[None, InvalidStateError]:
        """Transition to Cancelled from any non-Finalized state.

        Cancelling a Cancelled event succeeds and leaves it Cancelled.
        No domain event is emitted for this transition.

        Returns:
            Success(None): Cancelled.
            Failure(InvalidStateError): Event is Finalized.
        """
        if self._state.is_finalized:
            return Failure(
                error=self._invalid_state("cancel", EventError.CANNOT_CANCEL)
            )

        self._state = EventState.cancelled()
        self._updated_at = datetime.now(UTC)
        return Success(value=None)

    def add_section(self, section: Section | None) -> Result[None, DomainError]:
        """Append a section, enforcing id and name uniqueness.

        Allowed in every state.

        Args:
            section: Section to add.

        Returns:
            Success(None): Section appended.
            Failure(ValidationError): section is None (NULL_VALUE).
            Failure(ConflictError): Same id or exact same name exists
                (DUPLICATE_ENTITY).
        """
        if section is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.NULL_VALUE,
                    message=EventError.SECTION_REQUIRED,
                    field="section",
                )
            )

        for existing in self._sections:
            if existing.id == section.id:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.DUPLICATE_ENTITY,
                        message=EventError.DUPLICATE_SECTION_ID,
                        resource_type="Section",
                        conflicting_field="id",
                    )
                )
            if existing.name == section.name:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.DUPLICATE_ENTITY,
                        message=EventError.DUPLICATE_SECTION_NAME.format(
                            name=section.name
                        ),
                        resource_type="Section",
                        conflicting_field="name",
                    )
                )

        self._sections.append(section)
        self._updated_at = datetime.now(UTC)
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Domain event buffer
    # -------------------------------------------------------------------------

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Pending domain events in emission order.

        Reading does not consume: repeated reads return the same snapshot
        until clear_domain_events() is called.
        """
        return tuple(self._domain_events)

    def clear_domain_events(self) -> None:
        """Discard all pending domain events."""
        self._domain_events.clear()

    def _record(self, domain_event: DomainEvent) -> None:
        self._domain_events.append(domain_event)

    def _invalid_state(self, operation: str, template: str) -> InvalidStateError:
        return InvalidStateError(
            code=ErrorCode.INVALID_STATE,
            message=template.format(state=self._state.value),
            current_state=self._state.value,
            operation=operation,
        )

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Event(id={self._id!s}, name={self._name!r}, "
            f"state={self._state.value!r}, sections={len(self._sections)})"
        )
