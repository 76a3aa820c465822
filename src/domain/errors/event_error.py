"""Event aggregate error messages.

Defines the messages used by the Event aggregate, its Sections and its value
objects, for both raised construction errors and Failure results of state
transitions.

Architecture:
    - Domain layer constants (no infrastructure dependencies)
    - Transition failures carry these messages inside InvalidStateError,
      section conflicts inside ConflictError

Usage:
    from src.domain.errors import EventError

    match event.publish():
        case Failure(error=error) if error.code == ErrorCode.INVALID_STATE:
            ...
"""


class EventError:
    """Event aggregate error constants.

    Error Categories:
        - Field errors: *_REQUIRED, EMPTY_*, INVALID_*
        - Section errors: DUPLICATE_SECTION_*, NO_SECTIONS
        - State transition errors: CANNOT_* (formatted with the current state)
    """

    # Field errors
    NAME_REQUIRED = "Event name cannot be null"
    EMPTY_NAME = "Event name cannot be empty"
    DATE_REQUIRED = "Event date cannot be null"
    DATE_IN_PAST = "Event date must be today or in the future"
    DURATION_REQUIRED = "Event duration cannot be null"
    NEGATIVE_DURATION = "Duration hours and minutes cannot be negative"
    ZERO_DURATION = "Duration must be greater than zero"
    INVALID_DURATION = "Duration hours and minutes must be integers"
    PRICE_REQUIRED = "Price cannot be null"
    NEGATIVE_PRICE = "Price cannot be negative"
    INVALID_PRICE = "Price must be a finite decimal number"
    STATE_REQUIRED = "Event state cannot be null"
    INVALID_STATE_TOKEN = "Unknown event state '{token}'"

    # Section errors
    SECTIONS_REQUIRED = "Event sections cannot be null"
    NO_SECTIONS = "Event must have at least one section"
    SECTION_REQUIRED = "Section cannot be null"
    SECTION_NAME_REQUIRED = "Section name cannot be null"
    EMPTY_SECTION_NAME = "Section name cannot be empty"
    INVALID_CAPACITY = "Section capacity must be a positive integer"
    DUPLICATE_SECTION_ID = "A section with the same id already exists"
    DUPLICATE_SECTION_NAME = "A section named '{name}' already exists"

    # State transition errors
    CANNOT_PUBLISH = (
        "Cannot publish an event in state '{state}'. "
        "Only Draft events can be published."
    )
    CANNOT_FINALIZE = (
        "Cannot finalize an event in state '{state}'. "
        "Only Published events can be finalized."
    )
    CANNOT_CANCEL = "Cannot cancel an event in state '{state}'."
