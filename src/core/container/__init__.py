"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_event_handler, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging)
- events: Message transport and domain event publisher
- repositories: Repository factories
- event_handlers: Event lifecycle command/query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger

# Domain event publishing
from src.core.container.events import (
    close_message_transport,
    get_domain_event_publisher,
    get_message_transport,
)

# Repositories
from src.core.container.repositories import get_event_repository

# Event lifecycle handlers
from src.core.container.event_handlers import (
    get_cancel_event_handler,
    get_create_event_handler,
    get_finalize_event_handler,
    get_get_event_handler,
    get_publish_event_handler,
)

__all__ = [
    # Infrastructure
    "get_logger",
    # Events
    "get_message_transport",
    "get_domain_event_publisher",
    "close_message_transport",
    # Repositories
    "get_event_repository",
    # Event handlers
    "get_create_event_handler",
    "get_publish_event_handler",
    "get_finalize_event_handler",
    "get_cancel_event_handler",
    "get_get_event_handler",
]
