"""Report ORM: persists a report record owned by one identity.

Invariants:
    - owner_id is non-nullable with FK to identities.id (referential integrity only)
    - status is one of ReportStatus values, default "pending"
    - Authorization (who may act) is NOT enforced here: see core/enforce_ownership.py

Design Decisions:
    - Index on (owner_id, created_at): list_by_owner is the hot query
    - ON DELETE RESTRICT: identities are never deleted by normal flows
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import INITIAL_REPORT_STATUS
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReportModel(Base):
    """Report row."""
    __tablename__ = "reports"
    __table_args__ = (
        Index("ix_reports_owner_created", "owner_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("identities.id", ondelete="RESTRICT"),
        nullable=False,
    )
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=INITIAL_REPORT_STATUS.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
