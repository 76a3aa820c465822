"""Repository factories.

The events service ships an in-process repository; it is an app-scoped
singleton so that every handler sees the same store.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_repository import EventRepository


@lru_cache()
def get_event_repository() -> "EventRepository":
    """Get event repository singleton (app-scoped).

    Returns:
        InMemoryEventRepository instance.
    """
    from src.infrastructure.persistence.in_memory_event_repository import (
        InMemoryEventRepository,
    )

    return InMemoryEventRepository()
