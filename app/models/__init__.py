"""ORM Models: SQLAlchemy declarative models for both domains.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows never leave the repositories; Usecases see core/entities.py dataclasses

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.identity import IdentityModel  # noqa: F401
from app.models.report import ReportModel  # noqa: F401
