"""Message transport protocol (port).

The lowest seam between the publisher and a concrete broker. A transport
receives an already-encoded payload and its routing information; it knows
nothing about domain event classes.

Implementations:
    - RabbitMQTransport: src/infrastructure/messaging/rabbitmq_transport.py
    - InMemoryMessageTransport: src/infrastructure/messaging/in_memory_transport.py
"""

from typing import Protocol


class MessageTransportProtocol(Protocol):
    """Protocol for broker transports.

    Transports raise on failure. Callers (the publisher adapter) convert
    exceptions into Result failures.
    """

    async def publish(
        self, event_type_name: str, payload: bytes, routing_key: str
    ) -> None:
        """Send one message.

        Args:
            event_type_name: Domain event class name, set as the message type.
            payload: UTF-8 JSON body.
            routing_key: Topic routing key.

        Raises:
            Exception: If the broker cannot be reached or rejects the message.
        """
        ...

    async def close(self) -> None:
        """Release broker resources. Safe to call more than once."""
        ...
