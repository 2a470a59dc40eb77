"""
JSON document store for reservations.

The whole reservation collection lives in a single JSON document of
the form ``{"reservations": [...]}``.  ``ReservationStore`` keeps a
scratch copy of that collection in memory: callers ``load()`` it at
the start of every operation, read or mutate ``reservations`` and then
``persist()`` it.  Nothing is cached between operations, so the file
on disk is always the source of truth.

Writes go to a temporary file in the same directory which then
replaces the document with ``os.replace``; a crash mid-write leaves the
previous document intact.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def resolve_data_path(data_file: str) -> Path:
    """Compute the path to the JSON document.

    Absolute paths are used as is; relative paths are resolved against
    the current working directory.
    """
    path = Path(data_file)
    if path.is_absolute():
        return path
    return (Path.cwd() / path).resolve()


class ReservationStore:
    """In-memory view of the reservation collection backed by a JSON file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self.reservations: List[Dict[str, Any]] = []

    def load(self) -> List[Dict[str, Any]]:
        """Read the document into memory and return the collection.

        A missing or empty file, or a document without a
        ``reservations`` list, yields an empty collection.  Malformed
        JSON raises ``json.JSONDecodeError``.
        """
        data: Any = None
        if self.path.exists():
            raw = self.path.read_text(encoding="utf-8")
            if raw.strip():
                data = json.loads(raw)
        reservations = data.get("reservations") if isinstance(data, dict) else None
        self.reservations = reservations if isinstance(reservations, list) else []
        return self.reservations

    def persist(self) -> None:
        """Write the in-memory collection back to the document atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"reservations": self.reservations}, ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Persisted %d reservations to %s", len(self.reservations), self.path)
