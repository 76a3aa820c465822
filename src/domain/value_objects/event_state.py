"""EventState value object.

Wraps one of the four lifecycle tokens and owns the legality-of-transition
knowledge of the Event state machine.

Transition table (row = from, column = to):

    from\\to     Draft  Published  Finalized  Cancelled
    Draft         -       yes        no         yes
    Published     no       -         yes        yes
    Finalized     no       no         -         no
    Cancelled     no       no         no         -

Same-state transitions are reported as not allowed.

Usage:
    from src.domain.value_objects import EventState

    state = EventState("Draft")
    state.can_transition_to(EventState.published())  # True
"""

from dataclasses import dataclass
from typing import Self

from src.domain.enums.event_status import EventStatus
from src.domain.errors import EventError, InvalidArgumentError, NullValueError

_ALLOWED_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.DRAFT: frozenset({EventStatus.PUBLISHED, EventStatus.CANCELLED}),
    EventStatus.PUBLISHED: frozenset({EventStatus.FINALIZED, EventStatus.CANCELLED}),
    EventStatus.FINALIZED: frozenset(),
    EventStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class EventState:
    """Immutable lifecycle state of an Event.

    Equality and hash derive solely from the token, so two instances built
    from the same token are interchangeable.

    Attributes:
        value: One of "Draft", "Published", "Finalized", "Cancelled".

    Raises:
        NullValueError: If value is None.
        InvalidArgumentError: If value is not a recognized token
            (matching is case-sensitive, empty string is rejected).
    """

    value: str

    def __post_init__(self) -> None:
        """Validate the state token."""
        if self.value is None:
            raise NullValueError("state", EventError.STATE_REQUIRED)
        if isinstance(self.value, EventStatus):
            object.__setattr__(self, "value", self.value.value)
        if not isinstance(self.value, str) or not EventStatus.is_valid(self.value):
            raise InvalidArgumentError(
                "state", EventError.INVALID_STATE_TOKEN.format(token=self.value)
            )

    @classmethod
    def draft(cls) -> Self:
        """Initial state of every new Event."""
        return cls(EventStatus.DRAFT.value)

    @classmethod
    def published(cls) -> Self:
        return cls(EventStatus.PUBLISHED.value)

    @classmethod
    def finalized(cls) -> Self:
        return cls(EventStatus.FINALIZED.value)

    @classmethod
    def cancelled(cls) -> Self:
        return cls(EventStatus.CANCELLED.value)

    @property
    def status(self) -> EventStatus:
        """Enum member for this token."""
        return EventStatus(self.value)

    @property
    def is_draft(self) -> bool:
        return self.value == EventStatus.DRAFT.value

    @property
    def is_published(self) -> bool:
        return self.value == EventStatus.PUBLISHED.value

    @property
    def is_finalized(self) -> bool:
        return self.value == EventStatus.FINALIZED.value

    @property
    def is_cancelled(self) -> bool:
        return self.value == EventStatus.CANCELLED.value

    @property
    def is_terminal(self) -> bool:
        """True for Finalized and Cancelled."""
        return self.status in EventStatus.terminal_states()

    def can_transition_to(self, other: "EventState") -> bool:
        """Check whether moving from this state to `other` is legal.

        Args:
            other: Target state.

        Returns:
            bool: True if the transition table allows it.
        """
        return other.status in _ALLOWED_TRANSITIONS[self.status]

    def __str__(self) -> str:
        return self.value
