"""
Top-level package for the Room Reservations API.

This file makes ``room_reservations`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``room_reservations.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
