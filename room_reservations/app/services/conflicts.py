"""Double-booking detection."""

from typing import Any, Iterable, Mapping, Optional


def has_conflict(
    reservations: Iterable[Mapping[str, Any]],
    candidate: Mapping[str, str],
    exclude_id: Optional[int] = None,
) -> bool:
    """Return True if a reservation already holds the candidate's slot.

    A slot is the room (compared case-insensitively), the date and the
    time.  The record whose id equals ``exclude_id`` is skipped so an
    update can keep its own slot.
    """
    room = candidate["room"].lower()
    for existing in reservations:
        if exclude_id is not None and existing.get("id") == exclude_id:
            continue
        if (
            str(existing.get("room", "")).lower() == room
            and existing.get("date") == candidate["date"]
            and existing.get("time") == candidate["time"]
        ):
            return True
    return False


def slot_key(reservation: Mapping[str, Any]) -> str:
    """Sort key ordering reservations by date then time."""
    return f"{reservation.get('date', '')}T{reservation.get('time', '')}"
