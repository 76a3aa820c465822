"""Infrastructure service factories.

Application-scoped singletons for cross-cutting services.

Reference:
    Composition root: adapters are chosen here, never in the layers that
    use them.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.enums import Environment

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable, colored)
    - testing/ci/production: ConsoleAdapter (JSON)

    The level comes from LOG_LEVEL, or DEBUG when DEBUG=true. Every record
    carries the service name and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.environment != Environment.DEVELOPMENT
    level = "DEBUG" if settings.debug else settings.log_level

    return ConsoleAdapter(
        use_json=use_json,
        level=level,
        service=settings.app_name,
        version=settings.app_version,
    )
