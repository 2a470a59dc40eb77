"""
Error taxonomy for reservation operations.

Services raise these exceptions; the application registers a handler
that renders them as ``{"error": <message>}`` with the HTTP status
carried by the exception class.  They derive from ``ValueError`` so
that callers treating bad input generically keep working.
"""

from fastapi import status


class ReservationError(ValueError):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Invalid reservation request."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldsError(ReservationError):
    default_message = "Missing required fields (room, date, time, owner)."


class InvalidDateFormatError(ReservationError):
    default_message = "Invalid date format. Use YYYY-MM-DD."


class InvalidTimeFormatError(ReservationError):
    default_message = "Invalid time format. Use HH:MM (24h)."


class ConflictError(ReservationError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict: a reservation already exists for this room/date/time."


class NotFoundError(ReservationError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Reservation not found."
