"""Infrastructure errors package.

Exports infrastructure-level error classes for convenient importing.

Usage:
    from src.infrastructure.errors import InfrastructureError, TransportError
"""

from src.infrastructure.errors.infrastructure_error import (
    InfrastructureError,
    TransportError,
)

__all__ = [
    "InfrastructureError",
    "TransportError",
]
