"""Validation framework for input validation.

This module provides single-field rule functions used by the command
validators. Every rule returns a Result so rule sets can be evaluated
without short-circuiting and all violations reported together.

Codes:
    - NULL_VALUE: required value is missing (None)
    - INVALID_ARGUMENT: value is present but violates the rule

Usage:
    from src.core.validation import validate_not_empty, validate_positive_int
    from src.core.result import Success, Failure

    result = validate_not_empty(command.name, "name")
    match result:
        case Success(value=name):
            # Name is valid
            pass
        case Failure(error=error):
            print(error.field, error.message)
"""

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def _null(field_name: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.NULL_VALUE,
            message=f"{field_name} is required",
            field=field_name,
        )
    )


def _invalid(field_name: str, message: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            field=field_name,
        )
    )


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is present and, for strings, not blank.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    if value is None:
        return _null(field_name)
    if isinstance(value, str) and not value.strip():
        return _invalid(field_name, f"{field_name} cannot be empty")
    if not isinstance(value, str) and hasattr(value, "__len__") and not len(value):
        return _invalid(field_name, f"{field_name} must contain at least one item")
    return Success(value=value)


def validate_positive_int(value: Any, field_name: str) -> Result[int, ValidationError]:
    """Validate a strictly positive integer (booleans rejected).

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is None:
        return _null(field_name)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        return _invalid(field_name, f"{field_name} must be a positive integer")
    return Success(value=value)


def validate_non_negative_amount(
    value: Any, field_name: str
) -> Result[Decimal, ValidationError]:
    """Validate a finite, non-negative decimal amount.

    Integers, strings and floats are accepted and returned as Decimal.

    Args:
        value: Amount to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with the Decimal amount, Failure with ValidationError otherwise.
    """
    if value is None:
        return _null(field_name)
    if isinstance(value, bool):
        return _invalid(field_name, f"{field_name} must be a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        return _invalid(field_name, f"{field_name} must be a number")
    if not amount.is_finite():
        return _invalid(field_name, f"{field_name} must be a finite number")
    if amount < 0:
        return _invalid(field_name, f"{field_name} cannot be negative")
    return Success(value=amount)


def validate_not_in_past(
    value: Any, field_name: str
) -> Result[datetime, ValidationError]:
    """Validate a timestamp whose UTC calendar day is today or later.

    Naive datetimes are interpreted as UTC.

    Args:
        value: Timestamp to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is None:
        return _null(field_name)
    if not isinstance(value, datetime):
        return _invalid(field_name, f"{field_name} must be a datetime")
    day = value.date() if value.tzinfo is None else value.astimezone(UTC).date()
    if day < datetime.now(UTC).date():
        return _invalid(field_name, f"{field_name} cannot be in the past")
    return Success(value=value)


def validate_duration(
    hours: Any, minutes: Any, field_name: str = "duration"
) -> Result[tuple[int, int], ValidationError]:
    """Validate an hours/minutes pair: non-negative integers, not both zero.

    Args:
        hours: Whole hours.
        minutes: Minutes.
        field_name: Name reported on failure.

    Returns:
        Success with (hours, minutes), Failure with ValidationError otherwise.
    """
    if hours is None or minutes is None:
        return _null(field_name)
    for part in (hours, minutes):
        if not isinstance(part, int) or isinstance(part, bool):
            return _invalid(field_name, f"{field_name} parts must be integers")
    if hours < 0 or minutes < 0:
        return _invalid(field_name, f"{field_name} cannot be negative")
    if hours == 0 and minutes == 0:
        return _invalid(field_name, f"{field_name} must be greater than zero")
    return Success(value=(hours, minutes))


def validate_identifier(value: Any, field_name: str) -> Result[UUID, ValidationError]:
    """Validate an aggregate identifier (a non-nil UUID).

    Args:
        value: Identifier to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with the UUID, Failure with ValidationError otherwise.
    """
    if value is None:
        return _null(field_name)
    if not isinstance(value, UUID) or value.int == 0:
        return _invalid(field_name, f"{field_name} must be a valid identifier")
    return Success(value=value)
