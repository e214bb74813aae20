"""Report Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - ReportCreate.content: 1-20000 chars, stripped, non-empty
    - ReportUpdate: every field optional; status restricted to ReportStatus values
    - ReportResponse never exposes anything the owner could not already see

Design Decisions:
    - to_draft()/to_patch() convert to core entities so Usecases never import Pydantic
    - field_validator for side-effect-free transforms (strip): keeps models pure
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from app.core.domain_types import ReportStatus
from app.core.entities import Report, ReportDraft, ReportPatch


def _strip_non_empty(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("value cannot be empty or whitespace")
    return v


class ReportCreate(BaseModel):
    """Report creation: owner and status are assigned server-side."""
    content: str = Field(min_length=1, max_length=20_000)
    title: str | None = Field(None, max_length=200)

    @field_validator("content", "title")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_non_empty(v)

    def to_draft(self) -> ReportDraft:
        return ReportDraft(content=self.content, title=self.title)


class ReportUpdate(BaseModel):
    """Partial update: omitted fields are left unchanged."""
    content: str | None = Field(None, min_length=1, max_length=20_000)
    title: str | None = Field(None, max_length=200)
    status: ReportStatus | None = None

    @field_validator("content", "title")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return _strip_non_empty(v)

    def to_patch(self) -> ReportPatch:
        return ReportPatch(content=self.content, title=self.title, status=self.status)


class ReportResponse(BaseModel):
    """Report response: public-facing report data."""
    id: int
    owner_id: int
    title: str | None
    content: str
    status: ReportStatus
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, report: Report) -> "ReportResponse":
        return cls(
            id=report.id,
            owner_id=report.owner_id,
            title=report.title,
            content=report.content,
            status=report.status,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )


class ReportListQuery(BaseModel):
    """Pagination for the caller's own reports."""
    limit: int = Field(50, ge=1, le=100)
    offset: int = Field(0, ge=0)
