"""Unit tests for GetEventHandler."""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.queries import GetEvent
from src.application.queries.handlers.get_event_handler import (
    EventResult,
    GetEventHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from tests.conftest import create_event, create_section


@pytest.mark.unit
class TestGetEventHandler:
    """Test GetEvent query handling."""

    @pytest.mark.asyncio
    async def test_returns_dto(self):
        # Arrange
        event = create_event(
            sections=[create_section("General", 500, "50.00"), create_section("VIP", 50, "150.00")]
        )
        repo = AsyncMock()
        repo.get_by_id.return_value = event
        handler = GetEventHandler(event_repo=repo)

        # Act
        result = await handler.handle(GetEvent(event_id=event.id))

        # Assert
        assert isinstance(result, Success)
        dto = result.value
        assert isinstance(dto, EventResult)
        assert dto.id == event.id
        assert dto.state == "Draft"
        assert dto.duration_hours == 3
        assert [s.name for s in dto.sections] == ["General", "VIP"]
        assert dto.sections[1].price == Decimal("150.00")
        assert dto.total_capacity == 550
        assert dto.published_at is None

    @pytest.mark.asyncio
    async def test_query_does_not_drain_domain_events(self):
        event = create_event()
        repo = AsyncMock()
        repo.get_by_id.return_value = event

        await GetEventHandler(event_repo=repo).handle(GetEvent(event_id=event.id))

        assert len(event.domain_events) == 1

    @pytest.mark.asyncio
    async def test_not_found(self):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        result = await GetEventHandler(event_repo=repo).handle(GetEvent(event_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.EVENT_NOT_FOUND
