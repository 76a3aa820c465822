"""EventDuration value object (hours + minutes)."""

from dataclasses import dataclass
from datetime import timedelta

from src.domain.errors import EventError, InvalidArgumentError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class EventDuration:
    """How long an Event lasts.

    Attributes:
        hours: Whole hours (non-negative).
        minutes: Minutes (non-negative). Not capped at 59; the pair is
            stored as given.

    Raises:
        InvalidArgumentError: If either part is negative or not an integer,
            or if the total duration is zero.
    """

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        """Validate both parts and the total."""
        if not _is_int(self.hours) or not _is_int(self.minutes):
            raise InvalidArgumentError("duration", EventError.INVALID_DURATION)
        if self.hours < 0 or self.minutes < 0:
            raise InvalidArgumentError("duration", EventError.NEGATIVE_DURATION)
        if self.hours == 0 and self.minutes == 0:
            raise InvalidArgumentError("duration", EventError.ZERO_DURATION)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    def as_timedelta(self) -> timedelta:
        return timedelta(hours=self.hours, minutes=self.minutes)

    def __str__(self) -> str:
        return f"{self.hours}h{self.minutes:02d}m"
