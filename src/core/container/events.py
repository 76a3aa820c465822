"""Domain event publishing factories.

Application-scoped singletons: the message transport (one broker
connection per process) and the publisher built on top of it.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.domain.protocols.domain_event_publisher_protocol import (
        DomainEventPublisherProtocol,
    )
    from src.domain.protocols.message_transport_protocol import (
        MessageTransportProtocol,
    )


@lru_cache()
def get_message_transport() -> "MessageTransportProtocol":
    """Get message transport singleton (app-scoped).

    Container owns factory logic - decides which adapter based on EVENT_BUS_TYPE:
        - 'in-memory': InMemoryMessageTransport (development, tests)
        - 'rabbitmq': RabbitMQTransport (durable topic exchange EVENTS_EXCHANGE)

    The RabbitMQ connection is opened lazily on first publish.

    Returns:
        Transport implementing MessageTransportProtocol.
    """
    settings = get_settings()

    if settings.event_bus_type == "rabbitmq":
        from src.infrastructure.messaging.rabbitmq_transport import RabbitMQTransport

        return RabbitMQTransport(
            url=settings.rabbitmq_url,
            exchange_name=settings.events_exchange,
            logger=get_logger(),
        )

    from src.infrastructure.messaging.in_memory_transport import (
        InMemoryMessageTransport,
    )

    return InMemoryMessageTransport(
        logger=get_logger(), exchange_name=settings.events_exchange
    )


@lru_cache()
def get_domain_event_publisher() -> "DomainEventPublisherProtocol":
    """Get domain event publisher singleton (app-scoped).

    Returns:
        MessageBusEventPublisher over get_message_transport().

    Usage:
        publisher = get_domain_event_publisher()
        await publisher.publish(EventPublished(event_id=event.id))
    """
    from src.infrastructure.messaging.message_bus_event_publisher import (
        MessageBusEventPublisher,
    )

    return MessageBusEventPublisher(
        transport=get_message_transport(),
        logger=get_logger(),
    )


async def close_message_transport() -> None:
    """Close the cached transport (application shutdown)."""
    if get_message_transport.cache_info().currsize:
        await get_message_transport().close()
