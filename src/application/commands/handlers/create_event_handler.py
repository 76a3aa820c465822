"""CreateEvent command handler.

Flow:
1. Validate the command (all violations collected)
2. Build value objects, Sections and the Event aggregate (Draft)
3. Persist via repository.add()
4. Publish pending domain events (EventCreated), then clear them
5. Return Success(event_id)

On failure:
- Validation: Failure(ValidationFailedError), nothing built
- Construction: Failure(ValidationError), nothing persisted
- Persistence: Failure(DomainError PERSISTENCE_FAILED), nothing published
- Dispatch: Failure(EventDispatchError), event already persisted

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repository and publisher injected via protocols)
"""

from uuid import UUID

from src.application.commands.event_commands import CreateEvent
from src.application.events import dispatch_domain_events
from src.application.validators import (
    CommandValidator,
    create_event_validator,
    ensure_valid,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Event, Section
from src.domain.errors import ArgumentError
from src.domain.protocols import (
    DomainEventPublisherProtocol,
    EventRepository,
    LoggerProtocol,
)
from src.domain.value_objects import EventDuration, Price


class CreateEventHandler:
    """Handler for CreateEvent command.

    Dependencies (injected via constructor):
        - EventRepository: Aggregate persistence
        - DomainEventPublisherProtocol: Domain event delivery
        - LoggerProtocol: Structured logging
        - CommandValidator: Request rules (defaults to create_event_validator())
    """

    def __init__(
        self,
        event_repo: EventRepository,
        event_publisher: DomainEventPublisherProtocol,
        logger: LoggerProtocol,
        validator: CommandValidator[CreateEvent] | None = None,
    ) -> None:
        self._event_repo = event_repo
        self._event_publisher = event_publisher
        self._logger = logger
        self._validator = validator or create_event_validator()

    async def handle(self, cmd: CreateEvent) -> Result[UUID, DomainError]:
        """Handle CreateEvent command.

        Args:
            cmd: CreateEvent command.

        Returns:
            Success(event_id): Event created, persisted and announced.
            Failure(DomainError): See module docstring for failure modes.
        """
        # Step 1: Validate
        validation = ensure_valid(self._validator, cmd)
        if isinstance(validation, Failure):
            self._logger.warning(
                "event_create_rejected",
                fields=validation.error.fields(),
            )
            return validation

        # Step 2: Construct aggregate
        try:
            event = Event.create(
                name=cmd.name,
                description=cmd.description,
                date=cmd.date,
                duration=EventDuration(
                    hours=cmd.duration_hours, minutes=cmd.duration_minutes
                ),
                sections=[
                    Section(
                        name=section.name,
                        capacity=section.capacity,
                        price=Price(section.price),
                    )
                    for section in cmd.sections
                ],
            )
        except ArgumentError as e:
            self._logger.warning(
                "event_create_rejected", field=e.field, reason=e.message
            )
            return Failure(error=e.to_validation_error())

        # Step 3: Persist
        try:
            await self._event_repo.add(event)
        except Exception as e:
            self._logger.error("event_persist_failed", error=e, event_id=str(event.id))
            return Failure(
                error=DomainError(
                    code=ErrorCode.PERSISTENCE_FAILED,
                    message=f"Failed to save event: {e}",
                    details={"event_id": str(event.id)},
                )
            )

        self._logger.info(
            "event_created",
            event_id=str(event.id),
            name=event.name,
            sections=len(event.sections),
        )

        # Step 4: Publish and clear domain events
        dispatch = await dispatch_domain_events(
            event, self._event_publisher, self._logger
        )
        if isinstance(dispatch, Failure):
            return dispatch

        return Success(value=event.id)
