"""
Field normalisation and format checks for reservation bodies.

Checks run in a fixed order: presence, then date format, then time
format.  The first failing check raises and later ones are skipped.
Dates are only checked for shape, so ``2025-02-30`` is accepted.
"""

import re
from typing import Any, Dict, Mapping

from room_reservations.app.core.errors import (
    InvalidDateFormatError,
    InvalidTimeFormatError,
    MissingFieldsError,
)

REQUIRED_FIELDS = ("room", "date", "time", "owner")

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"(?:[01]\d|2[0-3]):[0-5]\d", re.ASCII)


def normalize(value: Any) -> str:
    """Return ``value`` as a trimmed string; ``None`` becomes ``""``.

    JSON scalars keep their JSON spelling: ``true`` stays ``"true"`` and
    an integral number such as ``1.0`` becomes ``"1"``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_valid_date(value: str) -> bool:
    return _DATE_RE.fullmatch(value) is not None


def is_valid_time(value: str) -> bool:
    return _TIME_RE.fullmatch(value) is not None


def validate_fields(payload: Mapping[str, Any] | None) -> Dict[str, str]:
    """Normalise and check the four reservation fields.

    Returns a dictionary with the normalised ``room``, ``date``,
    ``time`` and ``owner``.  Raises ``MissingFieldsError``,
    ``InvalidDateFormatError`` or ``InvalidTimeFormatError``.
    """
    payload = payload or {}
    fields = {name: normalize(payload.get(name)) for name in REQUIRED_FIELDS}
    if not all(fields.values()):
        raise MissingFieldsError()
    if not is_valid_date(fields["date"]):
        raise InvalidDateFormatError()
    if not is_valid_time(fields["time"]):
        raise InvalidTimeFormatError()
    return fields
