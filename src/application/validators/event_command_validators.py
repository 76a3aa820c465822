"""Declarative validators for Event lifecycle commands.

A validator is an ordered tuple of rules. Each rule looks at one aspect of
the command and yields Results from src.core.validation; the validator runs
every rule (no short-circuit) and collects the failures, so a caller sees
all violations of a request at once.

Usage:
    from src.application.validators import create_event_validator, ensure_valid

    match ensure_valid(create_event_validator(), command):
        case Failure(error=error):
            print(error.fields())  # ["name", "sections"]
        case Success():
            ...
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

from src.application.commands.event_commands import CreateEvent
from src.core.enums import ErrorCode
from src.core.errors import ValidationError, ValidationFailedError
from src.core.result import Failure, Result, Success
from src.core.validation import (
    validate_duration,
    validate_identifier,
    validate_non_negative_amount,
    validate_not_empty,
    validate_not_in_past,
    validate_positive_int,
)

type Rule[C] = Callable[[C], Iterable[Result[Any, ValidationError]]]


class CommandValidator[C](Protocol):
    """Validator port used by command handlers."""

    def validate(self, command: C) -> list[ValidationError]:
        """Return every violation of the command (empty when valid)."""
        ...


class RuleSetValidator[C]:
    """Validator built from an ordered rule set.

    Violations are reported in rule declaration order.
    """

    def __init__(self, rules: Sequence[Rule[C]]) -> None:
        self._rules = tuple(rules)

    def validate(self, command: C) -> list[ValidationError]:
        violations: list[ValidationError] = []
        for rule in self._rules:
            for result in rule(command):
                if isinstance(result, Failure):
                    violations.append(result.error)
        return violations


def ensure_valid[C](
    validator: CommandValidator[C], command: C
) -> Result[C, ValidationFailedError]:
    """Run a validator and fold its violations into a single error.

    Returns:
        Success(command): No violations.
        Failure(ValidationFailedError): All violations, in order.
    """
    violations = validator.validate(command)
    if not violations:
        return Success(value=command)
    return Failure(
        error=ValidationFailedError(
            code=ErrorCode.VALIDATION_FAILED,
            message=f"Validation failed for {type(command).__name__}",
            violations=tuple(violations),
        )
    )


# =============================================================================
# CreateEvent
# =============================================================================


def _name_rule(cmd: CreateEvent) -> Iterable[Result[Any, ValidationError]]:
    yield validate_not_empty(cmd.name, "name")


def _date_rule(cmd: CreateEvent) -> Iterable[Result[Any, ValidationError]]:
    yield validate_not_in_past(cmd.date, "date")


def _duration_rule(cmd: CreateEvent) -> Iterable[Result[Any, ValidationError]]:
    yield validate_duration(cmd.duration_hours, cmd.duration_minutes)


def _sections_rule(cmd: CreateEvent) -> Iterable[Result[Any, ValidationError]]:
    yield validate_not_empty(cmd.sections, "sections")


def _section_items_rule(cmd: CreateEvent) -> Iterable[Result[Any, ValidationError]]:
    for index, section in enumerate(cmd.sections or ()):
        prefix = f"sections[{index}]"
        if section is None:
            yield validate_not_empty(section, prefix)
            continue
        yield validate_not_empty(section.name, f"{prefix}.name")
        yield validate_positive_int(section.capacity, f"{prefix}.capacity")
        yield validate_non_negative_amount(section.price, f"{prefix}.price")


CREATE_EVENT_RULES: tuple[Rule[CreateEvent], ...] = (
    _name_rule,
    _date_rule,
    _duration_rule,
    _sections_rule,
    _section_items_rule,
)


def create_event_validator() -> RuleSetValidator[CreateEvent]:
    """Validator for CreateEvent."""
    return RuleSetValidator(CREATE_EVENT_RULES)


# =============================================================================
# PublishEvent / FinalizeEvent / CancelEvent
# =============================================================================


def _event_id_rule(cmd: Any) -> Iterable[Result[Any, ValidationError]]:
    yield validate_identifier(cmd.event_id, "event_id")


def event_id_validator() -> RuleSetValidator[Any]:
    """Validator for commands that target an existing Event by id."""
    return RuleSetValidator((_event_id_rule,))
