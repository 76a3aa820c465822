"""Unit tests for FinalizeEventHandler and CancelEventHandler."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import CancelEvent, FinalizeEvent
from src.application.commands.handlers.cancel_event_handler import CancelEventHandler
from src.application.commands.handlers.finalize_event_handler import (
    FinalizeEventHandler,
)
from src.core.errors import InvalidStateError, NotFoundError
from src.core.result import Failure, Success
from tests.conftest import create_event


def published_event():
    event = create_event()
    event.publish()
    event.clear_domain_events()
    return event


def build(handler_class, event):
    repo = AsyncMock()
    repo.get_by_id.return_value = event
    publisher = AsyncMock()
    publisher.publish.return_value = Success(value=None)
    handler = handler_class(
        event_repo=repo, event_publisher=publisher, logger=MagicMock()
    )
    return handler, repo, publisher


@pytest.mark.unit
class TestFinalizeEventHandler:
    """Test FinalizeEvent handling."""

    @pytest.mark.asyncio
    async def test_finalizes_published_event(self):
        event = published_event()
        handler, repo, publisher = build(FinalizeEventHandler, event)

        result = await handler.handle(FinalizeEvent(event_id=event.id))

        assert isinstance(result, Success)
        assert event.state.is_finalized
        repo.update.assert_awaited_once_with(event)
        publisher.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_draft_event_cannot_be_finalized(self):
        event = create_event()
        handler, repo, _ = build(FinalizeEventHandler, event)

        result = await handler.handle(FinalizeEvent(event_id=event.id))

        assert isinstance(result, Failure)
        assert isinstance(result.error, InvalidStateError)
        assert result.error.current_state == "Draft"
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_event(self):
        handler, _, _ = build(FinalizeEventHandler, None)

        result = await handler.handle(FinalizeEvent(event_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestCancelEventHandler:
    """Test CancelEvent handling."""

    @pytest.mark.asyncio
    async def test_cancels_published_event(self):
        event = published_event()
        handler, repo, _ = build(CancelEventHandler, event)

        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Success)
        assert event.state.is_cancelled
        repo.update.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_recancel_succeeds(self):
        event = create_event()
        event.cancel()
        handler, repo, _ = build(CancelEventHandler, event)

        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Success)
        assert event.state.is_cancelled
        repo.update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_finalized_event_cannot_be_cancelled(self):
        event = published_event()
        event.finalize()
        handler, repo, _ = build(CancelEventHandler, event)

        result = await handler.handle(CancelEvent(event_id=event.id))

        assert isinstance(result, Failure)
        assert result.error.current_state == "Finalized"
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_leftover_created_event_is_dispatched(self):
        """Test any pending domain events are flushed after a cancel."""
        event = create_event()
        handler, _, publisher = build(CancelEventHandler, event)

        await handler.handle(CancelEvent(event_id=event.id))

        publisher.publish.assert_awaited_once()
        assert event.domain_events == ()
