"""Unit tests for single-field validation rules."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.validation import (
    validate_duration,
    validate_identifier,
    validate_non_negative_amount,
    validate_not_empty,
    validate_not_in_past,
    validate_positive_int,
)


@pytest.mark.unit
class TestValidateNotEmpty:
    def test_value_passes(self):
        assert validate_not_empty("Rock", "name") == Success(value="Rock")

    def test_none_is_null_value(self):
        result = validate_not_empty(None, "name")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NULL_VALUE
        assert result.error.field == "name"

    def test_blank_string_is_invalid(self):
        result = validate_not_empty("  ", "name")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_ARGUMENT

    def test_empty_collection_is_invalid(self):
        result = validate_not_empty((), "sections")

        assert isinstance(result, Failure)
        assert result.error.field == "sections"


@pytest.mark.unit
class TestValidateNumbers:
    @pytest.mark.parametrize("value", [0, -3, True, 1.5, "5"])
    def test_positive_int_rejects(self, value):
        assert isinstance(validate_positive_int(value, "capacity"), Failure)

    def test_positive_int_accepts(self):
        assert validate_positive_int(10, "capacity") == Success(value=10)

    def test_amount_accepts_zero(self):
        assert validate_non_negative_amount(0, "price") == Success(value=Decimal("0"))

    @pytest.mark.parametrize("value", [Decimal("-1"), "abc", "NaN", False])
    def test_amount_rejects(self, value):
        assert isinstance(validate_non_negative_amount(value, "price"), Failure)

    def test_amount_none_is_null_value(self):
        result = validate_non_negative_amount(None, "price")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NULL_VALUE


@pytest.mark.unit
class TestValidateDateAndDuration:
    def test_future_date_passes(self):
        value = datetime.now(UTC) + timedelta(days=1)

        assert validate_not_in_past(value, "date") == Success(value=value)

    def test_past_date_fails(self):
        result = validate_not_in_past(datetime.now(UTC) - timedelta(days=1), "date")

        assert isinstance(result, Failure)
        assert result.error.field == "date"

    def test_duration_passes(self):
        assert validate_duration(2, 15) == Success(value=(2, 15))

    @pytest.mark.parametrize(
        ("hours", "minutes"), [(0, 0), (-1, 30), (1, -1), (None, 0), (1.0, 0)]
    )
    def test_duration_fails(self, hours, minutes):
        result = validate_duration(hours, minutes)

        assert isinstance(result, Failure)
        assert result.error.field == "duration"


@pytest.mark.unit
class TestValidateIdentifier:
    def test_uuid_passes(self):
        event_id = uuid7()

        assert validate_identifier(event_id, "event_id") == Success(value=event_id)

    @pytest.mark.parametrize("value", [UUID(int=0), "not-a-uuid"])
    def test_nil_or_non_uuid_fails(self, value):
        assert isinstance(validate_identifier(value, "event_id"), Failure)

    def test_none_is_null_value(self):
        result = validate_identifier(None, "event_id")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NULL_VALUE
