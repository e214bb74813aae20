"""SQLAlchemy Declarative Base: shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Imago ORM models."""
    pass


# Integer primary keys are 32-bit signed on PostgreSQL
MAX_ROW_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """True if value fits an Integer primary key column."""
    return 1 <= value <= MAX_ROW_ID
