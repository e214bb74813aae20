"""Services Layer: per-domain Usecases (auth, report).

Invariants:
    - Usecases depend only on core Protocols, never on SQLAlchemy or HTTP
    - Usecases raise core errors; Interop turns them into Outcomes

Design Decisions:
    - One usecase file per domain for locality
"""
