"""Domain value objects.

Immutable, self-validating types compared by value.

Usage:
    from src.domain.value_objects import EventDate, EventDuration, EventState, Price
"""

from src.domain.value_objects.event_date import EventDate
from src.domain.value_objects.event_duration import EventDuration
from src.domain.value_objects.event_state import EventState
from src.domain.value_objects.price import Price

__all__ = [
    "EventDate",
    "EventDuration",
    "EventState",
    "Price",
]
