"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateEvent, PublishEvent).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.event_commands import (
    CancelEvent,
    CreateEvent,
    FinalizeEvent,
    PublishEvent,
    SectionInput,
)

__all__ = [
    "CancelEvent",
    "CreateEvent",
    "FinalizeEvent",
    "PublishEvent",
    "SectionInput",
]
