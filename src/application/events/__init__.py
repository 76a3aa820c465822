"""Domain event dispatch.

Drains an aggregate's pending domain events after it has been persisted
and hands them to the domain event publisher, one at a time.
"""

from src.application.events.domain_event_dispatch import dispatch_domain_events

__all__ = [
    "dispatch_domain_events",
]
