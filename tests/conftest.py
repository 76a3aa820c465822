"""Pytest configuration and shared test helpers.

This configuration ensures:
1. Async tests are marked for pytest-asyncio even without the decorator
2. Container singletons never leak between tests
3. Event aggregates can be built in one line
"""

import inspect
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.entities.event import Event
from src.domain.entities.section import Section
from src.domain.value_objects.event_duration import EventDuration
from src.domain.value_objects.price import Price

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Test helper functions for domain entities


def future_date(days: int = 30) -> datetime:
    """Timestamp `days` days from now (UTC)."""
    return datetime.now(UTC) + timedelta(days=days)


def create_section(
    name: str = "General",
    capacity: int = 500,
    price: str = "50.00",
) -> Section:
    """Helper to create a Section for testing."""
    return Section(name=name, capacity=capacity, price=Price(Decimal(price)))


def create_event(
    name: str = "Rock Concert",
    description: str | None = "Open air",
    date: datetime | None = None,
    duration: EventDuration | None = None,
    sections: list[Section] | None = None,
) -> Event:
    """Helper to create a Draft Event for testing.

    Usage:
        # Default: "Rock Concert", one "General" section, 3h, 30 days ahead
        event = create_event()

        # Published event with no pending domain events
        event = create_event()
        event.publish()
        event.clear_domain_events()
    """
    return Event.create(
        name=name,
        description=description,
        date=date or future_date(),
        duration=duration or EventDuration(hours=3, minutes=0),
        sections=sections if sections is not None else [create_section()],
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind()/with_context() return the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture(autouse=True)
def clear_container_caches():
    """Reset app-scoped container singletons around every test."""
    from src.core.config import get_settings
    from src.core.container.events import (
        get_domain_event_publisher,
        get_message_transport,
    )
    from src.core.container.infrastructure import get_logger
    from src.core.container.repositories import get_event_repository

    caches = (
        get_settings,
        get_logger,
        get_message_transport,
        get_domain_event_publisher,
        get_event_repository,
    )
    for factory in caches:
        factory.cache_clear()
    yield
    for factory in caches:
        factory.cache_clear()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with in-memory adapters"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
