"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Configuration, logging, persistence and the error
taxonomy live in ``core``; request and response bodies in ``schemas``;
validation, conflict detection and the reservation workflow in
``services``; and the HTTP routes in ``api``.
"""

from .main import app  # noqa: F401
