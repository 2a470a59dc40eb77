"""
Pydantic models for room reservations.

Incoming bodies are deliberately loose: every field is optional and
may be any JSON value, because normalisation and validation (trimming,
presence and format checks) happen in the service layer where the
order of checks and the resulting error messages are controlled.
"""

from typing import Any

from pydantic import BaseModel, Field


class ReservationPayload(BaseModel):
    """Body of create and update requests."""

    room: Any = Field(default=None, examples=["A1"])
    date: Any = Field(default=None, examples=["2025-12-19"])
    time: Any = Field(default=None, examples=["10:00"])
    owner: Any = Field(default=None, examples=["Maria"])


class ReservationRead(BaseModel):
    id: int
    room: str
    date: str
    time: str
    owner: str
    # Timestamps are kept as the ISO strings stored in the document so
    # they round-trip unchanged.
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    model_config = {
        "populate_by_name": True,
    }
