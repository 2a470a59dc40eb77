"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box with a ``db.json`` document next to the
project and the bundled landing page.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Room Reservations API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON document holding the reservations.  A relative
    # path is resolved against the current working directory by the
    # ``store`` module.
    data_file: str = os.getenv("DATA_FILE", "db.json")

    # Directory containing ``index.html`` for the landing page.  A
    # relative path is resolved against the ``app`` package.
    static_dir: str = os.getenv("STATIC_DIR", "static")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
