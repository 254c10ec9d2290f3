"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, serving ``Database.json``
from the working directory on port 5050.
"""

import logging
import os
from dataclasses import dataclass

DEFAULT_PORT = 5050


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to ``default``.

    An unparsable value is logged and ignored rather than aborting
    startup.
    """
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring invalid %s=%r, using %s", name, raw, default
        )
        return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Alumni Search Engine API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = _int_env("PORT", DEFAULT_PORT)

    # Path to the JSON document holding the alumni collection.  A
    # relative path is resolved against the current working directory
    # by the ``store`` module.
    database_path: str = os.getenv("DATABASE_PATH", "Database.json")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
