"""Event lifecycle handler factories.

Handler instances are cheap and stateless; each call returns a new one
wired to the app-scoped repository, publisher and logger.
"""

from typing import TYPE_CHECKING

from src.core.container.events import get_domain_event_publisher
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import get_event_repository

if TYPE_CHECKING:
    from src.application.commands.handlers.cancel_event_handler import (
        CancelEventHandler,
    )
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.application.commands.handlers.finalize_event_handler import (
        FinalizeEventHandler,
    )
    from src.application.commands.handlers.publish_event_handler import (
        PublishEventHandler,
    )
    from src.application.queries.handlers.get_event_handler import GetEventHandler


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_create_event_handler() -> "CreateEventHandler":
    """Get CreateEvent command handler.

    Usage:
        handler = get_create_event_handler()
        result = await handler.handle(CreateEvent(...))
    """
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )

    return CreateEventHandler(
        event_repo=get_event_repository(),
        event_publisher=get_domain_event_publisher(),
        logger=get_logger().bind(handler="CreateEventHandler"),
    )


def get_publish_event_handler() -> "PublishEventHandler":
    """Get PublishEvent command handler."""
    from src.application.commands.handlers.publish_event_handler import (
        PublishEventHandler,
    )

    return PublishEventHandler(
        event_repo=get_event_repository(),
        event_publisher=get_domain_event_publisher(),
        logger=get_logger().bind(handler="PublishEventHandler"),
    )


def get_finalize_event_handler() -> "FinalizeEventHandler":
    from src.application.commands.handlers.finalize_event_handler import (
        FinalizeEventHandler,
    )

    return FinalizeEventHandler(
        event_repo=get_event_repository(),
        event_publisher=get_domain_event_publisher(),
        logger=get_logger().bind(handler="FinalizeEventHandler"),
    )


def get_cancel_event_handler() -> "CancelEventHandler":
    from src.application.commands.handlers.cancel_event_handler import (
        CancelEventHandler,
    )

    return CancelEventHandler(
        event_repo=get_event_repository(),
        event_publisher=get_domain_event_publisher(),
        logger=get_logger().bind(handler="CancelEventHandler"),
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


def get_get_event_handler() -> "GetEventHandler":
    """Get GetEvent query handler."""
    from src.application.queries.handlers.get_event_handler import GetEventHandler

    return GetEventHandler(event_repo=get_event_repository())
