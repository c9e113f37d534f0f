"""Runtime environments.

Settings uses the environment to pick log rendering and to expose
convenience flags (is_development, is_production, ...).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
