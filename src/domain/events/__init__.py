"""Domain events package.

Usage:
    from src.domain.events import DomainEvent, EventCreated, EventPublished
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.event_lifecycle_events import EventCreated, EventPublished

__all__ = [
    "DomainEvent",
    "EventCreated",
    "EventPublished",
]
