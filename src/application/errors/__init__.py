"""Application layer errors.

This package contains error types for the application layer (command/query handlers).

Exports:
    EventDispatchError: Domain events only partially delivered after commit
"""

from src.application.errors.event_dispatch_error import EventDispatchError

__all__ = [
    "EventDispatchError",
]
