"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain business logic: build a RequestContext, call Interop,
      render the Outcome

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
