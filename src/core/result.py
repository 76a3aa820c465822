"""Result types for railway-oriented programming.

Aggregate state transitions, command handlers and infrastructure adapters
return a Result instead of raising, so every failure mode of a use case is
visible in its signature and can be matched explicitly.

Usage:
    result = event.publish()
    match result:
        case Success():
            await repository.update(event)
        case Failure(error=error):
            logger.warning("publish_rejected", reason=error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
