"""Command validators.

Declarative rule sets checked before any aggregate is loaded or built.
"""

from src.application.validators.event_command_validators import (
    CommandValidator,
    RuleSetValidator,
    create_event_validator,
    ensure_valid,
    event_id_validator,
)

__all__ = [
    "CommandValidator",
    "RuleSetValidator",
    "create_event_validator",
    "ensure_valid",
    "event_id_validator",
]
