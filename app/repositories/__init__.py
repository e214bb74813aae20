"""Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - Each public method opens its own session and is one atomic unit
    - Raw driver errors never escape: NotFound / Conflict / DatabaseError only
    - Rows are converted to core entities before returning

Design Decisions:
    - Repositories hold the DatabaseSessionManager, not a session: they are wired
      once per process and shared by concurrent requests
"""
