"""Construction-time argument errors.

Value objects and entities validate themselves when they are built. A value
that is missing raises NullValueError; a value that is present but breaks a
field constraint raises InvalidArgumentError. Both are ValueError subclasses,
following Python's convention for bad argument values.

Command handlers catch these at the application boundary and convert them to
ValidationError data (railway-oriented programming), so they never escape a
use case.

Usage:
    from src.domain.errors import InvalidArgumentError

    try:
        duration = EventDuration(hours=0, minutes=0)
    except InvalidArgumentError as e:
        return Failure(error=e.to_validation_error())
"""

from src.core.enums import ErrorCode
from src.core.errors import ValidationError


class ArgumentError(ValueError):
    """Base class for construction-time argument errors."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def to_validation_error(self) -> ValidationError:
        """Convert to ValidationError data for a Failure result."""
        return ValidationError(code=self.code, message=self.message, field=self.field)


class NullValueError(ArgumentError):
    """Raised when a required value is absent (None)."""

    code = ErrorCode.NULL_VALUE

    def __init__(self, field: str, message: str | None = None) -> None:
        """Initialize null value error.

        Args:
            field: Name of the missing field.
            message: Optional human-readable message.
        """
        super().__init__(field, message or f"{field} cannot be null")


class InvalidArgumentError(ArgumentError):
    """Raised when a value is present but violates a field constraint."""

    code = ErrorCode.INVALID_ARGUMENT
