"""Unit tests for CreateEvent and event-id command validators.

Tests cover:
- Valid commands produce no violations
- Every violated rule is reported (no short-circuit), in rule order
- Section items are reported with indexed field names
- ensure_valid() folds violations into ValidationFailedError
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateEvent, PublishEvent, SectionInput
from src.application.validators import (
    create_event_validator,
    ensure_valid,
    event_id_validator,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationFailedError
from src.core.result import Failure, Success


def build_command(**overrides) -> CreateEvent:
    """Create a valid CreateEvent, overriding selected fields."""
    values = {
        "name": "Rock Concert",
        "description": "Open air",
        "date": datetime.now(UTC) + timedelta(days=30),
        "duration_hours": 3,
        "duration_minutes": 0,
        "sections": (
            SectionInput(name="General", capacity=500, price=Decimal("50.00")),
        ),
    }
    values.update(overrides)
    return CreateEvent(**values)


@pytest.mark.unit
class TestCreateEventValidator:
    """Test CreateEvent rule set."""

    def test_valid_command_has_no_violations(self):
        assert create_event_validator().validate(build_command()) == []

    def test_empty_name_reported(self):
        violations = create_event_validator().validate(build_command(name=""))

        assert [v.field for v in violations] == ["name"]

    def test_all_violations_collected_in_rule_order(self):
        # Arrange
        command = build_command(
            name="  ",
            date=datetime.now(UTC) - timedelta(days=3),
            duration_hours=0,
            duration_minutes=0,
            sections=(),
        )

        # Act
        violations = create_event_validator().validate(command)

        # Assert
        assert [v.field for v in violations] == ["name", "date", "duration", "sections"]

    def test_section_items_reported_with_index(self):
        command = build_command(
            sections=(
                SectionInput(name="General", capacity=500, price=Decimal("50")),
                SectionInput(name="", capacity=0, price=Decimal("-1")),
            )
        )

        violations = create_event_validator().validate(command)

        assert [v.field for v in violations] == [
            "sections[1].name",
            "sections[1].capacity",
            "sections[1].price",
        ]

    def test_none_sections_reported_once(self):
        violations = create_event_validator().validate(build_command(sections=None))

        assert [(v.field, v.code) for v in violations] == [
            ("sections", ErrorCode.NULL_VALUE)
        ]

    def test_none_section_item_reported_as_null(self):
        command = build_command(
            sections=(
                None,
                SectionInput(name="", capacity=10, price=Decimal("5")),
            )
        )

        violations = create_event_validator().validate(command)

        assert [(v.field, v.code) for v in violations] == [
            ("sections[0]", ErrorCode.NULL_VALUE),
            ("sections[1].name", ErrorCode.INVALID_ARGUMENT),
        ]


@pytest.mark.unit
class TestEventIdValidator:
    """Test event id rule set."""

    def test_valid_id(self):
        assert event_id_validator().validate(PublishEvent(event_id=uuid7())) == []

    @pytest.mark.parametrize("event_id", [None, UUID(int=0)])
    def test_missing_or_nil_id(self, event_id):
        violations = event_id_validator().validate(PublishEvent(event_id=event_id))

        assert [v.field for v in violations] == ["event_id"]


@pytest.mark.unit
class TestEnsureValid:
    """Test ensure_valid() folding."""

    def test_success_returns_command(self):
        command = build_command()

        assert ensure_valid(create_event_validator(), command) == Success(value=command)

    def test_failure_carries_all_violations(self):
        result = ensure_valid(create_event_validator(), build_command(name="", sections=()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationFailedError)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert result.error.fields() == ["name", "sections"]
        assert "CreateEvent" in result.error.message
