"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Argument errors (NULL_VALUE, INVALID_ARGUMENT)
- Validation errors (VALIDATION_FAILED)
- Resource errors (*_NOT_FOUND)
- Conflict errors (DUPLICATE_ENTITY)
- State machine violations (INVALID_STATE)
- Infrastructure failures (PERSISTENCE_FAILED, TRANSPORT_ERROR)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Argument errors
    NULL_VALUE = "null_value"
    INVALID_ARGUMENT = "invalid_argument"

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"

    # Conflict errors
    DUPLICATE_ENTITY = "duplicate_entity"

    # State machine violations
    INVALID_STATE = "invalid_state"

    # Infrastructure failures
    PERSISTENCE_FAILED = "persistence_failed"
    TRANSPORT_ERROR = "transport_error"
