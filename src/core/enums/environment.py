"""Application environment types.

Defines the runtime environments of the events service.
Used by Settings to pick the logging renderer and the message transport.

Environments:
- DEVELOPMENT: Local development, colored console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration environment, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
