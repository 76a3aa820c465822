"""Message bus adapters for domain events.

Exports:
    DomainEventCodec: JSON wire encoding and routing keys
    MessageBusEventPublisher: DomainEventPublisherProtocol implementation
    RabbitMQTransport: aio-pika topic exchange transport
    InMemoryMessageTransport: Recording transport for development/testing
"""

from src.infrastructure.messaging.domain_event_codec import DomainEventCodec
from src.infrastructure.messaging.in_memory_transport import (
    InMemoryMessageTransport,
    PublishedMessage,
)
from src.infrastructure.messaging.message_bus_event_publisher import (
    MessageBusEventPublisher,
)
from src.infrastructure.messaging.rabbitmq_transport import RabbitMQTransport

__all__ = [
    "DomainEventCodec",
    "InMemoryMessageTransport",
    "MessageBusEventPublisher",
    "PublishedMessage",
    "RabbitMQTransport",
]
