"""API Layer (Delivery): FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (204 has no body)

Design Decisions:
    - Thin routes delegate to interop; HTTP status comes from the Outcome
"""
