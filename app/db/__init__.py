"""Database Metadata: SQLAlchemy Base shared by models and migrations.

Invariants:
    - Single declarative Base per process
"""
