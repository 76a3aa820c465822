"""EventDate value object.

The day an Event takes place. Validation uses date-only granularity: the
time of day is ignored and the calendar day (in UTC) is compared against
today's UTC date, so an Event scheduled for earlier today is still valid.

Naive datetimes are interpreted as UTC.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Self

from src.domain.errors import EventError, InvalidArgumentError, NullValueError


def _utc_day(value: datetime) -> date:
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(UTC).date()


@dataclass(frozen=True)
class EventDate:
    """Immutable, not-in-the-past event timestamp.

    Attributes:
        value: Timestamp of the event (stored as given).

    Raises:
        NullValueError: If value is None.
        InvalidArgumentError: If value is not a datetime, or its day is
            strictly before today.

    Example:
        >>> EventDate(datetime.now(UTC) + timedelta(days=10))
        >>> EventDate(datetime.now(UTC) - timedelta(days=1))
        InvalidArgumentError: Event date must be today or in the future
    """

    value: datetime

    def __post_init__(self) -> None:
        """Validate the timestamp against today's date."""
        if self.value is None:
            raise NullValueError("date", EventError.DATE_REQUIRED)
        if not isinstance(self.value, datetime):
            raise InvalidArgumentError("date", "Event date must be a datetime")
        if _utc_day(self.value) < datetime.now(UTC).date():
            raise InvalidArgumentError("date", EventError.DATE_IN_PAST)

    @classmethod
    def restore(cls, value: datetime) -> Self:
        """Rebuild a stored date, skipping the not-in-the-past check."""
        restored = cls.__new__(cls)
        object.__setattr__(restored, "value", value)
        return restored

    @property
    def day(self) -> date:
        """Calendar day of the event (UTC)."""
        return _utc_day(self.value)

    def __str__(self) -> str:
        return self.value.isoformat()
