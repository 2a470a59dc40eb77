"""
Reservation endpoints.

These routes list, create, update and delete room reservations.  They
rely on the ``ReservationService`` stored on the application state to
perform validation, conflict detection and persistence.  Errors raised
by the service are rendered as ``{"error": <message>}`` by the handler
registered in ``main.create_app``.
"""

import re
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status

from room_reservations.app.schemas.reservation import ReservationPayload, ReservationRead
from room_reservations.app.services.reservation_service import ReservationService

router = APIRouter()


def get_reservation_service(request: Request) -> ReservationService:
    """Return the service owned by the running application."""
    return request.app.state.reservation_service


_ID_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_reservation_id(raw: str) -> Optional[int]:
    """Parse a path id; anything that is not a plain integer matches no record."""
    raw = raw.strip()
    if not _ID_RE.fullmatch(raw):
        return None
    return int(raw)


def payload_fields(body: Any) -> Optional[Dict[str, Any]]:
    """Extract the reservation fields from a JSON body.

    Bodies that are not JSON objects (arrays, strings, numbers) carry no
    fields, so they fail the presence check like an empty body.
    """
    if not isinstance(body, dict):
        return None
    return ReservationPayload.model_validate(body).model_dump()


@router.get("", response_model=List[ReservationRead])
async def list_reservations(
    room: Optional[str] = Query(None, description="Case-insensitive substring of the room name"),
    date: Optional[str] = Query(None, description="Exact date, YYYY-MM-DD"),
    service: ReservationService = Depends(get_reservation_service),
) -> List[ReservationRead]:
    """List reservations ordered by date and time."""
    return await service.list_reservations(room=room, date=date)


@router.post("", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    payload: Any = Body(None, examples=[{"room": "A1", "date": "2025-12-19", "time": "10:00", "owner": "Maria"}]),
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationRead:
    """Create a reservation.

    Returns 400 when a field is missing or malformed and 409 when the
    room is already booked at that date and time.
    """
    return await service.create_reservation(payload_fields(payload))


@router.put("/{reservation_id}", response_model=ReservationRead)
async def update_reservation(
    reservation_id: str,
    payload: Any = Body(None, examples=[{"room": "A1", "date": "2025-12-19", "time": "10:00", "owner": "Maria"}]),
    service: ReservationService = Depends(get_reservation_service),
) -> ReservationRead:
    """Replace the room, date, time and owner of a reservation.

    Keeping the same slot is allowed; moving onto a slot held by a
    different reservation returns 409.  Unknown ids return 404.
    """
    return await service.update_reservation(
        parse_reservation_id(reservation_id),
        payload_fields(payload),
    )


@router.delete("/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reservation(
    reservation_id: str,
    service: ReservationService = Depends(get_reservation_service),
) -> Response:
    """Delete a reservation; 404 if it does not exist."""
    await service.delete_reservation(parse_reservation_id(reservation_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
