"""
API package containing the HTTP routes.

``router`` aggregates the domain routers from ``endpoints`` and is
mounted by the application under the ``/api`` prefix.
"""
