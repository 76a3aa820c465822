"""GetEvent query handler.

Handles requests to retrieve a single Event with its sections.
Returns DTO (not domain entity) so callers cannot mutate the aggregate or
drain its domain events.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.application.queries.event_queries import GetEvent
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Event
from src.domain.protocols import EventRepository


@dataclass
class SectionResult:
    """Section result DTO.

    Price value object converted to a plain Decimal.
    """

    id: UUID
    name: str
    capacity: int
    price: Decimal


@dataclass
class EventResult:
    """Single event result DTO.

    Attributes:
        id: Event unique identifier.
        name: Event name.
        description: Event description.
        date: Event timestamp.
        duration_hours: Duration hours part.
        duration_minutes: Duration minutes part.
        state: Lifecycle state token ("Draft", "Published"...).
        sections: Sections in insertion order.
        total_capacity: Sum of section capacities.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
        published_at: Publication timestamp (None until published).
    """

    id: UUID
    name: str
    description: str
    date: datetime
    duration_hours: int
    duration_minutes: int
    state: str
    sections: list[SectionResult]
    total_capacity: int
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None


class GetEventHandler:
    """Handler for GetEvent query.

    Dependencies (injected via constructor):
        - EventRepository: Aggregate retrieval
    """

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(self, query: GetEvent) -> Result[EventResult, DomainError]:
        """Handle GetEvent query.

        Args:
            query: GetEvent query with event ID.

        Returns:
            Success(EventResult): Event found.
            Failure(NotFoundError): No event with this ID.
        """
        event = await self._event_repo.get_by_id(query.event_id)
        if event is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message=f"Event {query.event_id} not found",
                    resource_type="Event",
                    resource_id=str(query.event_id),
                )
            )

        return Success(value=self._to_result(event))

    @staticmethod
    def _to_result(event: Event) -> EventResult:
        return EventResult(
            id=event.id,
            name=event.name,
            description=event.description,
            date=event.date.value,
            duration_hours=event.duration.hours,
            duration_minutes=event.duration.minutes,
            state=event.state.value,
            sections=[
                SectionResult(
                    id=section.id,
                    name=section.name,
                    capacity=section.capacity,
                    price=section.price.amount,
                )
                for section in event.sections
            ],
            total_capacity=event.total_capacity,
            created_at=event.created_at,
            updated_at=event.updated_at,
            published_at=event.published_at,
        )
