"""Identity ORM: persists the binding between a provider subject and an internal id.

Invariants:
    - id is an autoincrement integer primary key (store-assigned)
    - external_id is non-nullable and UNIQUE (one Identity per subject id)
    - external_id is never rewritten after insert; only email/display_name change

Design Decisions:
    - Unique constraint at the store, not application locks: concurrent first-seen
      requests race on INSERT and the loser re-reads (ADR: create-or-fetch)
    - No ORM relationship to reports: Report rows are loaded by owner_id query only
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.entities import DISPLAY_NAME_MAX_LENGTH
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdentityModel(Base):
    """Identity row: one per verified external subject."""
    __tablename__ = "identities"
    __table_args__ = (
        UniqueConstraint("external_id", name="uq_identities_external_id"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    external_id: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    display_name: Mapped[str | None] = mapped_column(
        String(DISPLAY_NAME_MAX_LENGTH), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
