"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON accepted and returned by the HTTP layer and
are kept apart from the stored records, which remain plain dictionaries
so unknown keys in the document survive a load/persist cycle.
"""
