"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (message broker).

Architecture:
- Infrastructure catches exceptions and maps to DomainError
- Infrastructure errors inherit from DomainError (not Exception)
- Uses InfrastructureErrorCode for internal error tracking
- Maps to domain ErrorCode when flowing to domain layer
- Used with Result types for error propagation
"""

from dataclasses import dataclass
from typing import Any

from src.core.errors import DomainError
from src.infrastructure.enums import InfrastructureErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode (maps from InfrastructureErrorCode).
        message: Human-readable message.
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(InfrastructureError):
    """Message bus delivery failure.

    Never retried by the publisher.

    Attributes:
        code: ErrorCode.TRANSPORT_ERROR.
        message: Human-readable message.
        infrastructure_code: BROKER_UNAVAILABLE, PUBLISH_FAILED or
            SERIALIZATION_FAILED.
        event_type: Domain event class name that was being delivered.
        routing_key: Routing key used (None if encoding failed first).
        details: Additional context (original exception type).
    """

    event_type: str
    routing_key: str | None = None
