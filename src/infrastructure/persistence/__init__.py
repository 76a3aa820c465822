"""Persistence adapters.

Exports:
    InMemoryEventRepository: In-process EventRepository implementation
"""

from src.infrastructure.persistence.in_memory_event_repository import (
    InMemoryEventRepository,
)

__all__ = [
    "InMemoryEventRepository",
]
