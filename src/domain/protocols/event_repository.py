"""EventRepository protocol for Event aggregate persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.event import Event


class EventRepository(Protocol):
    """Event repository protocol (port).

    Defines the interface for Event aggregate persistence. Each load must
    reconstruct an independent aggregate: callers mutate what they load and
    only the next add/update makes the change visible to other requests.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        add: Persist a new aggregate
        get_by_id: Retrieve aggregate by ID
        update: Persist changes of an existing aggregate

    Concurrency:
        The repository is the sole arbiter of cross-request consistency.
        Without version checks, concurrent updates are last-writer-wins.
    """

    async def add(self, event: Event) -> None:
        """Persist a new Event.

        Args:
            event: Event aggregate to persist. Its pending domain events are
                not persisted.

        Raises:
            Exception: Any storage failure. Handlers map it to
                PERSISTENCE_FAILED.
        """
        ...

    async def get_by_id(self, event_id: UUID) -> Event | None:
        """Find Event by ID.

        Args:
            event_id: Event's unique identifier.

        Returns:
            Event if found, None otherwise.

        Example:
            >>> event = await repo.get_by_id(event_id)
            >>> if event:
            ...     print(event.state.value)
        """
        ...

    async def update(self, event: Event) -> None:
        """Persist changes to an existing Event.

        Args:
            event: Event aggregate with modifications.

        Raises:
            Exception: Any storage failure, including an unknown id.
        """
        ...
