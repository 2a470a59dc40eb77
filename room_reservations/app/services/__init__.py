"""
Service layer abstraction.

Validation and conflict detection are plain functions; the
``ReservationService`` combines them with the JSON store so that the
API handlers only translate between HTTP and service calls.
"""
