"""Wire encoding of domain events.

One JSON object per domain event, keys in camelCase, UUIDs as strings,
timestamps as ISO 8601. The routing key is the lowercase class name, so
consumers bind with patterns such as "eventpublished" or "event*".

Example:
    >>> codec = DomainEventCodec()
    >>> codec.encode(EventCreated(event_id=event_id, name="Rock Concert"))
    b'{"messageId":"...","occurredAt":"2026-10-19T12:00:00Z","eventId":"...","name":"Rock Concert"}'
    >>> codec.routing_key_for(EventCreated(...))
    'eventcreated'
"""

from dataclasses import fields
from typing import Any

from pydantic.alias_generators import to_camel
from pydantic_core import to_json

from src.domain.events.base_event import DomainEvent


class DomainEventCodec:
    """Encodes domain event dataclasses for the message bus.

    Raises:
        pydantic_core.PydanticSerializationError: From encode(), if a field
            value has no JSON representation.
    """

    @staticmethod
    def event_type_name(event: DomainEvent) -> str:
        return type(event).__name__

    @staticmethod
    def routing_key_for(event: DomainEvent) -> str:
        return type(event).__name__.lower()

    def to_payload(self, event: DomainEvent) -> dict[str, Any]:
        """Map dataclass fields to a camelCase dict (declaration order)."""
        return {to_camel(f.name): getattr(event, f.name) for f in fields(event)}

    def encode(self, event: DomainEvent) -> bytes:
        """Encode one domain event as UTF-8 JSON bytes."""
        return to_json(self.to_payload(event))
