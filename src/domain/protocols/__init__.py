"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import EventRepository, LoggerProtocol
"""

from src.domain.protocols.domain_event_publisher_protocol import (
    DomainEventPublisherProtocol,
)
from src.domain.protocols.event_repository import EventRepository
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.message_transport_protocol import MessageTransportProtocol

__all__ = [
    "DomainEventPublisherProtocol",
    "EventRepository",
    "LoggerProtocol",
    "MessageTransportProtocol",
]
