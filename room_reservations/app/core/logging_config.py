"""
Logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called, and always
applies the requested level to the ``room_reservations`` logger so the
level setting is honoured even when a host such as uvicorn or pytest
configured the root logger first.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "room_reservations"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure application logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
