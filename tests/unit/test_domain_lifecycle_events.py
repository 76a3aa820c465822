"""Unit tests for EventCreated and EventPublished domain events."""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime
from uuid import UUID

import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.domain.events import DomainEvent, EventCreated, EventPublished


@pytest.mark.unit
class TestLifecycleEvents:
    """Test domain event records."""

    def test_event_created_fields(self):
        event_id = uuid7()

        fact = EventCreated(event_id=event_id, name="Rock Concert")

        assert isinstance(fact, DomainEvent)
        assert fact.event_id == event_id
        assert fact.name == "Rock Concert"
        assert isinstance(fact.message_id, UUID)

    @freeze_time("2030-01-01 10:00:00")
    def test_occurred_at_is_utc_now(self):
        fact = EventPublished(event_id=uuid7())

        assert fact.occurred_at == datetime(2030, 1, 1, 10, 0, tzinfo=UTC)
        assert fact.occurred_at.tzinfo is UTC

    def test_message_ids_are_unique(self):
        event_id = uuid7()

        assert (
            EventPublished(event_id=event_id).message_id
            != EventPublished(event_id=event_id).message_id
        )

    def test_events_are_immutable(self):
        fact = EventPublished(event_id=uuid7())

        with pytest.raises(FrozenInstanceError):
            fact.event_id = uuid7()  # type: ignore[misc]

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            EventPublished(uuid7())  # type: ignore[misc]
