"""
Business logic for room reservations.

The ``ReservationService`` implements listing, creation, update and
deletion on top of a ``ReservationStore``.  Every operation reloads the
collection from disk first.  Store I/O runs in a worker thread, so the
event loop keeps serving other requests while a document is read or
written.  Every operation holds a single ``asyncio.Lock`` for its whole
load, check, mutate and persist sequence: two concurrent writers can
never both pass the conflict check against the same snapshot, and a
read never swaps the shared in-memory copy under a writer.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from room_reservations.app.core.errors import ConflictError, NotFoundError, ReservationError
from room_reservations.app.core.store import ReservationStore
from room_reservations.app.schemas.reservation import ReservationRead
from room_reservations.app.services.conflicts import has_conflict, slot_key
from room_reservations.app.services.validation import validate_fields

logger = logging.getLogger(__name__)

UPDATE_CONFLICT_MESSAGE = "Conflict: another reservation already exists for this room/date/time."


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_reservation_id(reservations: Iterable[Mapping[str, Any]], now_ms: Optional[int] = None) -> int:
    """Return a new id derived from the clock in milliseconds.

    The id is bumped past the largest existing id when the clock
    repeats or runs backwards, so ids only ever increase.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    highest = max(
        (r["id"] for r in reservations if isinstance(r.get("id"), int)),
        default=0,
    )
    return max(now_ms, highest + 1)


class ReservationService:
    """Service for managing the reservation collection."""

    def __init__(self, store: ReservationStore) -> None:
        self.store = store
        self._lock = asyncio.Lock()

    async def list_reservations(
        self,
        room: Optional[str] = None,
        date: Optional[str] = None,
    ) -> List[ReservationRead]:
        """Return reservations sorted by date and time.

        ``room`` is a case-insensitive substring filter and ``date`` an
        exact filter.  Empty values are ignored.
        """
        async with self._lock:
            results = list(await asyncio.to_thread(self.store.load))
        if room:
            needle = room.lower()
            results = [r for r in results if needle in str(r.get("room", "")).lower()]
        if date:
            results = [r for r in results if r.get("date") == date]
        results.sort(key=slot_key)
        return [ReservationRead.model_validate(r) for r in results]

    async def create_reservation(self, payload: Optional[Mapping[str, Any]]) -> ReservationRead:
        """Validate ``payload`` and append a new reservation.

        Raises a ``ReservationError`` subclass on invalid input and
        ``ConflictError`` if the slot is already taken.
        """
        fields = self._validate(payload)
        async with self._lock:
            reservations = await asyncio.to_thread(self.store.load)
            if has_conflict(reservations, fields):
                logger.debug("Rejected reservation for taken slot %s", fields)
                raise ConflictError()
            record: Dict[str, Any] = {
                "id": next_reservation_id(reservations),
                **fields,
                "createdAt": utc_timestamp(),
                "updatedAt": None,
            }
            reservations.append(record)
            await asyncio.to_thread(self.store.persist)
        logger.info("Created reservation %s (%s %s %s)", record["id"], record["room"], record["date"], record["time"])
        return ReservationRead.model_validate(record)

    async def update_reservation(
        self,
        reservation_id: Optional[int],
        payload: Optional[Mapping[str, Any]],
    ) -> ReservationRead:
        """Overwrite the fields of an existing reservation.

        The body is validated before the lookup.  Other keys of the
        stored record, including ``id`` and ``createdAt``, are kept and
        ``updatedAt`` is refreshed.
        """
        fields = self._validate(payload)
        async with self._lock:
            reservations = await asyncio.to_thread(self.store.load)
            index = self._find_index(reservations, reservation_id)
            if index is None:
                raise NotFoundError()
            if has_conflict(reservations, fields, exclude_id=reservation_id):
                logger.debug("Rejected update of %s to taken slot %s", reservation_id, fields)
                raise ConflictError(UPDATE_CONFLICT_MESSAGE)
            record = {**reservations[index], **fields, "updatedAt": utc_timestamp()}
            reservations[index] = record
            await asyncio.to_thread(self.store.persist)
        logger.info("Updated reservation %s", reservation_id)
        return ReservationRead.model_validate(record)

    async def delete_reservation(self, reservation_id: Optional[int]) -> None:
        """Remove a reservation; raise ``NotFoundError`` if it does not exist."""
        async with self._lock:
            reservations = await asyncio.to_thread(self.store.load)
            remaining = [r for r in reservations if reservation_id is None or r.get("id") != reservation_id]
            if len(remaining) == len(reservations):
                raise NotFoundError()
            self.store.reservations = remaining
            await asyncio.to_thread(self.store.persist)
        logger.info("Deleted reservation %s", reservation_id)

    @staticmethod
    def _validate(payload: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        try:
            return validate_fields(payload)
        except ReservationError as e:
            logger.debug("Rejected reservation body: %s", e)
            raise

    @staticmethod
    def _find_index(reservations: List[Dict[str, Any]], reservation_id: Optional[int]) -> Optional[int]:
        if reservation_id is None:
            return None
        for index, record in enumerate(reservations):
            if record.get("id") == reservation_id:
                return index
        return None
