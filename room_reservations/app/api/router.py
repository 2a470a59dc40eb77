"""
Top-level API router.

Aggregates the domain routers under a unified prefix.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import reservations

router = APIRouter()

router.include_router(reservations.router, prefix="/reservations", tags=["reservations"])
