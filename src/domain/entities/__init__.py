"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.event import Event
from src.domain.entities.section import Section

__all__ = [
    "Event",
    "Section",
]
