"""Publish-and-clear step shared by every Event command handler.

Runs after the aggregate has been persisted:

1. Snapshot the pending domain events (emission order).
2. Publish them sequentially; stop at the first failure.
3. Clear the aggregate's buffer only when every event was accepted.

There is no retry and no compensation. A failure here means the aggregate
is committed but some consumers were not told; the returned
EventDispatchError says exactly which events are missing.
"""

from src.application.errors import EventDispatchError
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.event import Event
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.domain_event_publisher_protocol import (
    DomainEventPublisherProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


async def dispatch_domain_events(
    event: Event,
    publisher: DomainEventPublisherProtocol,
    logger: LoggerProtocol,
) -> Result[tuple[DomainEvent, ...], EventDispatchError]:
    """Publish the aggregate's pending domain events, then clear them.

    Args:
        event: Persisted Event aggregate.
        publisher: Domain event publisher.
        logger: Structured logger.

    Returns:
        Success(events): Every pending event was accepted, buffer cleared.
        Failure(EventDispatchError): Delivery stopped at one event; the
            buffer is left untouched.
    """
    pending = event.domain_events

    for index, domain_event in enumerate(pending):
        result = await publisher.publish(domain_event)
        if isinstance(result, Failure):
            delivered = pending[:index]
            undelivered = pending[index:]
            logger.error(
                "domain_event_dispatch_failed",
                aggregate_id=str(event.id),
                event_type=type(domain_event).__name__,
                delivered=len(delivered),
                undelivered=len(undelivered),
                reason=result.error.message,
            )
            return Failure(
                error=EventDispatchError(
                    code=ErrorCode.TRANSPORT_ERROR,
                    message=(
                        f"Event {event.id} was saved but "
                        f"{len(undelivered)} of {len(pending)} domain events "
                        f"were not delivered: {result.error.message}"
                    ),
                    aggregate_id=event.id,
                    delivered=delivered,
                    undelivered=undelivered,
                    cause=result.error,
                )
            )

    event.clear_domain_events()
    if pending:
        logger.debug(
            "domain_events_dispatched",
            aggregate_id=str(event.id),
            count=len(pending),
        )
    return Success(value=pending)
