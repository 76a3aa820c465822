"""Infrastructure-specific error codes.

These are internal codes for tracking infrastructure failures.
They are mapped to domain ErrorCode when flowing to domain layer.

Categories:
- Message broker errors (BROKER_*, PUBLISH_*)
- Encoding errors (SERIALIZATION_*)
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    # Message broker errors
    BROKER_UNAVAILABLE = "broker_unavailable"
    PUBLISH_FAILED = "publish_failed"

    # Encoding errors
    SERIALIZATION_FAILED = "serialization_failed"
