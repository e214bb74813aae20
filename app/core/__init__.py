"""Core Layer: domain entities, errors, protocols and pure rules.

Invariants:
    - No module in core/ imports from services/, api/, interop/, infrastructure/, or db/
    - Pure functions are deterministic; IO only appears as Protocol signatures

Design Decisions:
    - Functional core separated from imperative shell: ownership and outcome
      mapping are testable without fakes
"""
