"""Domain errors package.

Usage:
    from src.domain.errors import EventError, InvalidArgumentError, NullValueError
"""

from src.domain.errors.argument_error import (
    ArgumentError,
    InvalidArgumentError,
    NullValueError,
)
from src.domain.errors.event_error import EventError

__all__ = [
    "ArgumentError",
    "EventError",
    "InvalidArgumentError",
    "NullValueError",
]
