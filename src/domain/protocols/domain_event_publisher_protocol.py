"""Domain event publisher protocol (port).

Defines how the application layer hands a single domain event to the
outside world. Adapters turn the event into a message and deliver it to the
message bus; the application layer never sees broker types.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Returns Result types; transport exceptions never cross this boundary
    - No retry: a failed delivery is reported once and left to the caller

Implementations:
    - MessageBusEventPublisher: src/infrastructure/messaging/message_bus_event_publisher.py

Usage:
    >>> from src.core.container import get_domain_event_publisher
    >>>
    >>> publisher = get_domain_event_publisher()
    >>> match await publisher.publish(EventPublished(event_id=event.id)):
    ...     case Failure(error=error):
    ...         logger.error("Delivery failed", error_code=error.code.value)
"""

from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.events.base_event import DomainEvent


class DomainEventPublisherProtocol(Protocol):
    """Protocol for publishing domain events to external consumers.

    Delivery semantics are at-least-once from the caller's point of view:
    a Success means the bus accepted the message.
    """

    async def publish(self, event: DomainEvent) -> Result[None, DomainError]:
        """Deliver one domain event.

        Args:
            event: Domain event to deliver.

        Returns:
            Success(None): Message accepted by the bus.
            Failure(DomainError): Serialization or transport failure.
        """
        ...
