"""Domain event publisher backed by a message transport.

Implements DomainEventPublisherProtocol: encodes the domain event with
DomainEventCodec and hands it to a MessageTransportProtocol adapter
(RabbitMQ in production, in-memory in development/testing).

Transport exceptions are caught here, at the adapter boundary, and
returned as TransportError. Nothing is retried.
"""

from pydantic_core import PydanticSerializationError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.message_transport_protocol import MessageTransportProtocol
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import TransportError
from src.infrastructure.messaging.domain_event_codec import DomainEventCodec


class MessageBusEventPublisher:
    """Publishes domain events to the message bus.

    Note: Does NOT inherit from DomainEventPublisherProtocol (structural typing).
    """

    def __init__(
        self,
        transport: MessageTransportProtocol,
        logger: LoggerProtocol,
        codec: DomainEventCodec | None = None,
    ) -> None:
        self._transport = transport
        self._logger = logger
        self._codec = codec or DomainEventCodec()

    async def publish(self, event: DomainEvent) -> Result[None, TransportError]:
        """Encode and deliver one domain event.

        Args:
            event: Domain event to deliver.

        Returns:
            Success(None): Transport accepted the message.
            Failure(TransportError): Encoding failed, broker unreachable, or
                the broker rejected the message.
        """
        event_type = self._codec.event_type_name(event)

        try:
            payload = self._codec.encode(event)
        except PydanticSerializationError as e:
            self._logger.error(
                "domain_event_encoding_failed", error=e, event_type=event_type
            )
            return Failure(
                error=TransportError(
                    code=ErrorCode.TRANSPORT_ERROR,
                    message=f"Cannot encode {event_type}: {e}",
                    infrastructure_code=InfrastructureErrorCode.SERIALIZATION_FAILED,
                    event_type=event_type,
                )
            )

        routing_key = self._codec.routing_key_for(event)

        try:
            await self._transport.publish(event_type, payload, routing_key)
        except ConnectionError as e:
            return Failure(
                error=self._transport_error(
                    InfrastructureErrorCode.BROKER_UNAVAILABLE, event_type, routing_key, e
                )
            )
        except Exception as e:
            return Failure(
                error=self._transport_error(
                    InfrastructureErrorCode.PUBLISH_FAILED, event_type, routing_key, e
                )
            )

        return Success(value=None)

    @staticmethod
    def _transport_error(
        infrastructure_code: InfrastructureErrorCode,
        event_type: str,
        routing_key: str,
        error: Exception,
    ) -> TransportError:
        return TransportError(
            code=ErrorCode.TRANSPORT_ERROR,
            message=f"Failed to publish {event_type}: {error}",
            infrastructure_code=infrastructure_code,
            event_type=event_type,
            routing_key=routing_key,
            details={"error_type": type(error).__name__},
        )
