"""Event queries (CQRS read operations).

Queries represent requests for Event information. They are immutable
dataclasses with question-like names. Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEvent:
    """Get a single Event by ID.

    Attributes:
        event_id: Event identifier.

    Example:
        >>> result = await handler.handle(GetEvent(event_id=event_id))
    """

    event_id: UUID
