"""Unit tests for InMemoryMessageTransport."""

import pytest

from src.infrastructure.messaging import InMemoryMessageTransport


@pytest.mark.unit
class TestInMemoryMessageTransport:
    """Test recording and failure injection."""

    @pytest.mark.asyncio
    async def test_records_messages_in_order(self, mock_logger):
        # Arrange
        transport = InMemoryMessageTransport(logger=mock_logger)

        # Act
        await transport.publish("EventCreated", b'{"name":"a"}', "eventcreated")
        await transport.publish("EventPublished", b'{"eventId":"1"}', "eventpublished")

        # Assert
        assert [m.routing_key for m in transport.messages] == [
            "eventcreated",
            "eventpublished",
        ]
        first = transport.messages[0]
        assert first.exchange == "events.domain.events"
        assert first.event_type == "EventCreated"
        assert first.body() == {"name": "a"}
        assert first.published_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_custom_exchange_name(self, mock_logger):
        transport = InMemoryMessageTransport(logger=mock_logger, exchange_name="x.events")

        await transport.publish("EventCreated", b"{}", "eventcreated")

        assert transport.messages[0].exchange == "x.events"

    @pytest.mark.asyncio
    async def test_fail_with_raises_and_records_nothing(self, mock_logger):
        transport = InMemoryMessageTransport(logger=mock_logger)
        transport.fail_with(ConnectionError("down"))

        with pytest.raises(ConnectionError):
            await transport.publish("EventCreated", b"{}", "eventcreated")

        assert transport.messages == ()
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_fail_after_accepts_first_messages(self, mock_logger):
        transport = InMemoryMessageTransport(logger=mock_logger)
        transport.fail_with(RuntimeError("nack"), after=1)

        await transport.publish("EventCreated", b"{}", "eventcreated")
        with pytest.raises(RuntimeError):
            await transport.publish("EventPublished", b"{}", "eventpublished")

        assert len(transport.messages) == 1

    @pytest.mark.asyncio
    async def test_fail_with_none_recovers(self, mock_logger):
        transport = InMemoryMessageTransport(logger=mock_logger)
        transport.fail_with(RuntimeError("nack"))
        transport.fail_with(None)

        await transport.publish("EventCreated", b"{}", "eventcreated")

        assert len(transport.messages) == 1

    @pytest.mark.asyncio
    async def test_clear_and_close(self, mock_logger):
        transport = InMemoryMessageTransport(logger=mock_logger)
        await transport.publish("EventCreated", b"{}", "eventcreated")

        transport.clear()
        await transport.close()

        assert transport.messages == ()
