"""
Environment detection.
"""

import os
from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class EnvironmentManager:
    """Detects the running environment and derives environment defaults."""

    def __init__(self):
        self.env = self._detect_environment()

    def _detect_environment(self) -> Environment:
        """Detect current environment from ENV variable."""
        env_str = os.getenv("ENV", "development").lower()
        try:
            return Environment(env_str)
        except ValueError:
            return Environment.DEVELOPMENT

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.env == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == Environment.PRODUCTION

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.env == Environment.TESTING

    def get_log_level(self) -> str:
        """Get appropriate log level for environment."""
        level_map = {
            Environment.DEVELOPMENT: "DEBUG",
            Environment.STAGING: "INFO",
            Environment.PRODUCTION: "WARNING",
            Environment.TESTING: "ERROR",
        }
        return os.getenv("LOG_LEVEL", level_map[self.env]).upper()

    def get_debug_mode(self) -> bool:
        """Get debug mode setting."""
        if self.is_production():
            return False
        return os.getenv("DEBUG", "true").lower() == "true"
