"""Unit tests for dispatch_domain_events().

Tests cover:
- Events published in emission order, buffer cleared after all accepted
- Stop at first failure; delivered / undelivered split; buffer kept
- No pending events is a successful no-op
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.events import dispatch_domain_events
from src.application.errors import EventDispatchError
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Success
from src.domain.events import EventCreated, EventPublished
from tests.conftest import create_event


def two_pending_events():
    event = create_event()
    event.publish()
    return event


@pytest.mark.unit
class TestDispatchDomainEvents:
    """Test publish-and-clear step."""

    @pytest.mark.asyncio
    async def test_publishes_in_order_and_clears(self):
        # Arrange
        event = two_pending_events()
        publisher = AsyncMock()
        publisher.publish.return_value = Success(value=None)

        # Act
        result = await dispatch_domain_events(event, publisher, MagicMock())

        # Assert
        assert isinstance(result, Success)
        assert [type(e) for e in result.value] == [EventCreated, EventPublished]
        published = [c.args[0] for c in publisher.publish.await_args_list]
        assert list(result.value) == published
        assert event.domain_events == ()

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self):
        # Arrange
        event = two_pending_events()
        pending = event.domain_events
        publisher = AsyncMock()
        transport_error = DomainError(code=ErrorCode.TRANSPORT_ERROR, message="nack")
        publisher.publish.side_effect = [
            Success(value=None),
            Failure(error=transport_error),
        ]
        logger = MagicMock()

        # Act
        result = await dispatch_domain_events(event, publisher, logger)

        # Assert
        assert isinstance(result, Failure)
        error = result.error
        assert isinstance(error, EventDispatchError)
        assert error.code == ErrorCode.TRANSPORT_ERROR
        assert error.aggregate_id == event.id
        assert error.delivered == pending[:1]
        assert error.undelivered == pending[1:]
        assert error.cause == transport_error
        assert event.domain_events == pending
        logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_first_event_failure_delivers_nothing(self):
        event = two_pending_events()
        publisher = AsyncMock()
        publisher.publish.return_value = Failure(
            error=DomainError(code=ErrorCode.TRANSPORT_ERROR, message="down")
        )

        result = await dispatch_domain_events(event, publisher, MagicMock())

        assert result.error.delivered == ()
        assert len(result.error.undelivered) == 2
        assert publisher.publish.await_count == 1

    @pytest.mark.asyncio
    async def test_no_pending_events(self):
        event = create_event()
        event.clear_domain_events()
        publisher = AsyncMock()

        result = await dispatch_domain_events(event, publisher, MagicMock())

        assert result == Success(value=())
        publisher.publish.assert_not_awaited()
