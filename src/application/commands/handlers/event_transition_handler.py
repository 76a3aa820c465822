"""Shared four-phase flow for commands that move an existing Event.

Subclasses name the aggregate operation to run; this base class owns the
protocol around it:

1. Validate the command (event_id present)
2. Load the aggregate (NotFoundError if absent)
3. Run the transition in memory, then persist via repository.update()
4. Publish pending domain events, then clear them

The transition runs before persistence is attempted. If the transition is
rejected or persistence fails, the loaded instance is discarded with the
request, so no state change escapes.
"""

from abc import ABC, abstractmethod
from typing import Any

from src.application.events import dispatch_domain_events
from src.application.validators import CommandValidator, ensure_valid, event_id_validator
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Event
from src.domain.protocols import (
    DomainEventPublisherProtocol,
    EventRepository,
    LoggerProtocol,
)


class EventTransitionHandler(ABC):
    """Base handler for PublishEvent, FinalizeEvent and CancelEvent.

    Attributes:
        operation: Operation name used in rejection log records.
        completed_log: Log record emitted after the change is persisted.
    """

    operation: str
    completed_log: str

    def __init__(
        self,
        event_repo: EventRepository,
        event_publisher: DomainEventPublisherProtocol,
        logger: LoggerProtocol,
        validator: CommandValidator[Any] | None = None,
    ) -> None:
        self._event_repo = event_repo
        self._event_publisher = event_publisher
        self._logger = logger
        self._validator = validator or event_id_validator()

    @abstractmethod
    def _apply(self, event: Event) -> Result[None, DomainError]:
        """Run the aggregate transition."""

    async def handle(self, cmd: Any) -> Result[None, DomainError]:
        """Handle a transition command.

        Args:
            cmd: Command carrying an event_id.

        Returns:
            Success(None): Transition persisted and its domain events announced.
            Failure(ValidationFailedError): Missing or nil event_id.
            Failure(NotFoundError): No such event.
            Failure(InvalidStateError): Transition not allowed.
            Failure(DomainError PERSISTENCE_FAILED): Storage failure.
            Failure(EventDispatchError): Persisted, not fully announced.
        """
        # Step 1: Validate
        validation = ensure_valid(self._validator, cmd)
        if isinstance(validation, Failure):
            self._logger.warning(
                f"event_{self.operation}_rejected",
                fields=validation.error.fields(),
            )
            return validation

        event_id = cmd.event_id

        # Step 2: Load
        try:
            event = await self._event_repo.get_by_id(event_id)
        except Exception as e:
            self._logger.error("event_load_failed", error=e, event_id=str(event_id))
            return Failure(
                error=DomainError(
                    code=ErrorCode.PERSISTENCE_FAILED,
                    message=f"Failed to load event: {e}",
                    details={"event_id": str(event_id)},
                )
            )
        if event is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message=f"Event {event_id} not found",
                    resource_type="Event",
                    resource_id=str(event_id),
                )
            )

        # Step 3: Mutate, then persist
        transition = self._apply(event)
        if isinstance(transition, Failure):
            self._logger.warning(
                f"event_{self.operation}_rejected",
                event_id=str(event_id),
                state=event.state.value,
            )
            return transition

        try:
            await self._event_repo.update(event)
        except Exception as e:
            self._logger.error("event_persist_failed", error=e, event_id=str(event_id))
            return Failure(
                error=DomainError(
                    code=ErrorCode.PERSISTENCE_FAILED,
                    message=f"Failed to save event: {e}",
                    details={"event_id": str(event_id)},
                )
            )

        self._logger.info(
            self.completed_log,
            event_id=str(event_id),
            state=event.state.value,
        )

        # Step 4: Publish and clear domain events
        dispatch = await dispatch_domain_events(
            event, self._event_publisher, self._logger
        )
        if isinstance(dispatch, Failure):
            return dispatch

        return Success(value=None)
