"""Domain enums package.

Usage:
    from src.domain.enums import EventStatus
"""

from src.domain.enums.event_status import EventStatus

__all__ = ["EventStatus"]
