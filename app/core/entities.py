"""Domain Entities: plain value objects passed between Repository, Usecase and Interop.

Invariants:
    - Entities are frozen: a change produces a new instance (dataclasses.replace)
    - Identity.external_id is immutable once bound to an id
    - Report always carries owner_id so the Usecase can authorize
    - id/created_at/updated_at are None until the store assigns them
    - Identity.display_name never exceeds DISPLAY_NAME_MAX_LENGTH

Design Decisions:
    - Dataclasses over ORM rows: Usecases never touch SQLAlchemy objects and
      stay testable with in-memory fakes (ADR: functional core)
"""

from dataclasses import dataclass
from datetime import datetime

from app.core.domain_types import (
    IdentityId, ReportId, SubjectId, ReportStatus, INITIAL_REPORT_STATUS,
)

DISPLAY_NAME_MAX_LENGTH = 200


def clip_display_name(value: str | None) -> str | None:
    """Fit a provider-supplied name into the stored column width."""
    if value is None:
        return None
    return value[:DISPLAY_NAME_MAX_LENGTH]


@dataclass(frozen=True)
class Claims:
    """Verified attributes about a credential holder."""
    subject_id: SubjectId
    email: str | None
    expires_at: datetime
    display_name: str | None = None


@dataclass(frozen=True)
class Identity:
    """Internal record for a verified user."""
    external_id: SubjectId
    email: str | None = None
    display_name: str | None = None
    id: IdentityId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_claims(cls, claims: Claims) -> "Identity":
        return cls(
            external_id=claims.subject_id,
            email=claims.email,
            display_name=clip_display_name(claims.display_name),
        )


@dataclass(frozen=True)
class Report:
    """A domain record owned by exactly one Identity."""
    owner_id: IdentityId
    content: str
    title: str | None = None
    status: ReportStatus = INITIAL_REPORT_STATUS
    id: ReportId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ReportDraft:
    """Caller-supplied fields for a new report."""
    content: str
    title: str | None = None


@dataclass(frozen=True)
class ReportPatch:
    """Partial update: None means 'leave unchanged'."""
    content: str | None = None
    title: str | None = None
    status: ReportStatus | None = None

    @property
    def is_empty(self) -> bool:
        return self.content is None and self.title is None and self.status is None


@dataclass(frozen=True)
class ProfilePatch:
    """Self-service identity metadata update."""
    display_name: str | None = None
