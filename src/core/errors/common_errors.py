"""Common error classes used across all domains and layers.

These are generic errors that don't belong to any specific domain.
They are used throughout the application for common failure scenarios.

Error Types:
- ValidationError: A single field constraint violation (null or invalid value)
- ValidationFailedError: Every violated rule of a request, collected
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate identity or name)
- InvalidStateError: Operation illegal for the current lifecycle state

Usage:
    from src.core.errors import ValidationError, NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_ARGUMENT,
        message="Event name cannot be empty",
        field="name",
    ))
"""

from dataclasses import dataclass, field

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure for a single field.

    Attributes:
        code: ErrorCode enum (NULL_VALUE or INVALID_ARGUMENT).
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailedError(DomainError):
    """Aggregated request validation failure.

    Validation never short-circuits: every violated rule of the request is
    reported, in rule declaration order.

    Attributes:
        code: ErrorCode.VALIDATION_FAILED.
        message: Human-readable summary.
        violations: One ValidationError per violated rule.
        details: Additional context.
    """

    violations: tuple[ValidationError, ...] = field(default_factory=tuple)

    def fields(self) -> list[str]:
        """Return the names of the fields that failed, in order."""
        return [v.field for v in self.violations if v.field is not None]


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Event, Section).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate identity or name).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (id, name).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidStateError(DomainError):
    """Operation is not allowed in the current lifecycle state.

    The message always names the current state.

    Attributes:
        code: ErrorCode.INVALID_STATE.
        message: Human-readable message naming the current state.
        current_state: State token the aggregate was in.
        operation: Name of the rejected operation.
        details: Additional context.
    """

    current_state: str
    operation: str
