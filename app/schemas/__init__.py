"""Pydantic Schemas: request/response contracts for the auth and report routes.

Invariants:
    - Input validated at the boundary before Interop sees it
    - Schemas convert to core entities (to_draft/to_patch) and back (from_entity)
"""
