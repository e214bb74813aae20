"""Ownership Enforcement: decides whether an identity may act on a report.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Existence is checked before ownership
    - Absent and not-owned are indistinguishable to the caller: both raise
      ResourceNotFoundError("Report", id), for every operation

Design Decisions:
    - Hide existence over Forbidden: a foreign report id reveals nothing
      (ADR: one disclosure policy for read, update and delete)
    - Raise instead of returning error dicts: Usecases propagate, Interop maps
"""

from app.core.domain_types import ReportId
from app.core.entities import Identity, Report
from app.core.errors import ResourceNotFoundError, ErrorContext


def is_owner(report: Report, identity: Identity) -> bool:
    """Owner check: acting identity must match the report's owner field."""
    return identity.id is not None and report.owner_id == identity.id


def require_owned(
    report: Report | None, identity: Identity, report_id: ReportId,
) -> Report:
    """Return the report if it exists and belongs to identity, else raise NotFound."""
    if report is None or not is_owner(report, identity):
        raise ResourceNotFoundError(
            "Report", str(report_id),
            ErrorContext(identity_id=identity.id, resource_id=str(report_id)),
        )
    return report
