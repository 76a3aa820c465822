"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and the dependency container

The core module has NO dependencies on the domain or application layers
(the container is the composition root and imports lazily).
"""

from src.core.errors import (
    ConflictError,
    DomainError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
    ValidationFailedError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "InvalidStateError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
    "ValidationFailedError",
]
