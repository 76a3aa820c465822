"""Infrastructure enums package.

Usage:
    from src.infrastructure.enums import InfrastructureErrorCode

    if error.infrastructure_code == InfrastructureErrorCode.BROKER_UNAVAILABLE:
        ...
"""

from src.infrastructure.enums.infrastructure_error_code import (
    InfrastructureErrorCode,
)

__all__ = ["InfrastructureErrorCode"]
