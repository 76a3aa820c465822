"""Event lifecycle states.

Defines the tokens of the Event state machine.

State Machine:
    DRAFT → PUBLISHED → FINALIZED
    DRAFT/PUBLISHED → CANCELLED

    - DRAFT: Created, not yet visible to buyers (unique initial state)
    - PUBLISHED: Visible, tickets on sale
    - FINALIZED: Took place (terminal)
    - CANCELLED: Called off (terminal)

Usage:
    from src.domain.enums import EventStatus

    if EventStatus.is_valid(token):
        state = EventState(token)
"""

from enum import Enum


class EventStatus(str, Enum):
    """Event lifecycle state tokens.

    String Enum:
        Inherits from str for easy serialization and storage.
        Values are capitalized and matched case-sensitively.

    Transition rules live on the EventState value object.
    """

    DRAFT = "Draft"
    PUBLISHED = "Published"
    FINALIZED = "Finalized"
    CANCELLED = "Cancelled"

    @classmethod
    def values(cls) -> list[str]:
        """Get all state tokens as strings.

        Returns:
            list[str]: List of state tokens.
        """
        return [status.value for status in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a recognized state token.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid token.
        """
        return value in cls.values()

    @classmethod
    def terminal_states(cls) -> list["EventStatus"]:
        """Get terminal states (no outgoing transitions).

        Returns:
            list[EventStatus]: Terminal states.
        """
        return [cls.FINALIZED, cls.CANCELLED]
