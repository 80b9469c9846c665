"""
Configuration management for mdslides.
Loads environment variables and provides centralized config access.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "")
    try:
        return int(value) if value.strip() else default
    except ValueError:
        # Reported by Config.validate()
        return -1


class Config:
    """Application configuration."""

    # Rendering
    POLL_INTERVAL_MS = _int_env("MDSLIDES_POLL_INTERVAL_MS", 16)
    TITLE_FONT = os.getenv("MDSLIDES_TITLE_FONT", "standard")

    # Logging
    LOG_FILE = os.getenv("MDSLIDES_LOG_FILE", "")
    LOG_LEVEL = os.getenv("MDSLIDES_LOG_LEVEL", "WARNING").upper()

    @classmethod
    def log_level(cls) -> int:
        """Numeric logging level for LOG_LEVEL."""
        return getattr(logging, cls.LOG_LEVEL, logging.WARNING)

    @classmethod
    def validate(cls):
        """Validate the configuration."""
        errors = []

        if cls.POLL_INTERVAL_MS <= 0:
            errors.append("MDSLIDES_POLL_INTERVAL_MS must be a positive integer")

        if not cls.TITLE_FONT:
            errors.append("MDSLIDES_TITLE_FONT must not be empty")

        if cls.LOG_LEVEL not in LOG_LEVELS:
            errors.append(f"MDSLIDES_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True
