"""Runtime environment types.

Used by Settings and the container to pick the logging renderer.

Environments:
- DEVELOPMENT: human-readable colored logs
- TESTING: JSON logs for test capture
- CI: JSON logs for machine parsing
- PRODUCTION: JSON logs shipped by the host
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Whether log output should be machine-readable JSON."""
        return self is not Environment.DEVELOPMENT
