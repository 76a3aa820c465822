"""In-memory message transport.

Development/testing implementation of MessageTransportProtocol. Records
every message instead of sending it, and can be told to fail so tests can
exercise the persist-then-publish failure path.

Thread Safety:
    NOT thread-safe (single-process, single event loop).
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic_core import from_json

from src.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class PublishedMessage:
    """One recorded message.

    Attributes:
        exchange: Exchange name the message was addressed to.
        event_type: Message type property (domain event class name).
        routing_key: Topic routing key.
        payload: JSON body.
        published_at: UTC time the transport accepted it.
    """

    exchange: str
    event_type: str
    routing_key: str
    payload: bytes
    published_at: datetime

    def body(self) -> dict[str, Any]:
        """Decoded JSON body."""
        return from_json(self.payload)


class InMemoryMessageTransport:
    """Records messages in publish order.

    Attributes:
        _messages: Accepted messages, oldest first.
        _failure: Exception raised by publish() while set.
        _fail_after: Number of further publishes to accept before failing.
    """

    def __init__(
        self, logger: LoggerProtocol, exchange_name: str = "events.domain.events"
    ) -> None:
        self._logger = logger
        self._exchange_name = exchange_name
        self._messages: list[PublishedMessage] = []
        self._failure: Exception | None = None
        self._fail_after = 0

    @property
    def messages(self) -> tuple[PublishedMessage, ...]:
        return tuple(self._messages)

    def fail_with(self, error: Exception | None, *, after: int = 0) -> None:
        """Make publish() raise `error`.

        Args:
            error: Exception to raise, or None to stop failing.
            after: Number of publishes to accept before the first failure.
        """
        self._failure = error
        self._fail_after = after

    def clear(self) -> None:
        self._messages.clear()

    async def publish(
        self, event_type_name: str, payload: bytes, routing_key: str
    ) -> None:
        if self._failure is not None:
            if self._fail_after <= 0:
                self._logger.error(
                    "message_publish_failed",
                    error=self._failure,
                    exchange=self._exchange_name,
                    event_type=event_type_name,
                    routing_key=routing_key,
                )
                raise self._failure
            self._fail_after -= 1

        self._messages.append(
            PublishedMessage(
                exchange=self._exchange_name,
                event_type=event_type_name,
                routing_key=routing_key,
                payload=payload,
                published_at=datetime.now(UTC),
            )
        )
        self._logger.debug(
            "message_published",
            exchange=self._exchange_name,
            event_type=event_type_name,
            routing_key=routing_key,
        )

    async def close(self) -> None:
        """Nothing to release."""
