"""Report Usecase: report CRUD gated by the ownership rule.

Invariants:
    - Every operation requires a Resolved Identity (non-null id)
    - create_report: owner_id = identity.id, status = pending, regardless of input
    - get/update/delete: existence check, then owner check (core/enforce_ownership.py)
    - Absent and foreign reports both surface as ResourceNotFoundError
    - list_my_reports: newest first, returned as a one-shot iterator

Design Decisions:
    - update/delete re-use get_report: one authorization path for every operation
    - Empty patch returns the current report without a write
"""

import logging
from collections.abc import Iterator
from dataclasses import replace

from app.core.domain_types import ReportId, INITIAL_REPORT_STATUS
from app.core.entities import Identity, Report, ReportDraft, ReportPatch
from app.core.enforce_ownership import require_owned
from app.core.errors import UnauthenticatedError
from app.core.repository_protocols import ReportRepository

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def _require_resolved(identity: Identity) -> None:
    if identity.id is None:
        raise UnauthenticatedError("Identity not resolved")


class ReportUseCase:
    """Report operations on behalf of a resolved identity."""

    def __init__(self, repo: ReportRepository):
        self._repo = repo

    async def create_report(self, identity: Identity, draft: ReportDraft) -> Report:
        _require_resolved(identity)
        return await self._repo.create(Report(
            owner_id=identity.id,
            content=draft.content,
            title=draft.title,
            status=INITIAL_REPORT_STATUS,
        ))

    async def get_report(self, identity: Identity, report_id: ReportId) -> Report:
        _require_resolved(identity)
        report = await self._repo.get_by_id(report_id)
        return require_owned(report, identity, report_id)

    async def update_report(
        self, identity: Identity, report_id: ReportId, patch: ReportPatch,
    ) -> Report:
        current = await self.get_report(identity, report_id)
        if patch.is_empty:
            return current
        changes = {
            name: value
            for name, value in (
                ("content", patch.content),
                ("title", patch.title),
                ("status", patch.status),
            )
            if value is not None
        }
        updated = await self._repo.update(replace(current, **changes))
        logger.info(
            "Report updated",
            extra={"report_id": report_id, "identity_id": identity.id},
        )
        return updated

    async def delete_report(self, identity: Identity, report_id: ReportId) -> None:
        await self.get_report(identity, report_id)
        await self._repo.delete(report_id)

    async def list_my_reports(
        self, identity: Identity, limit: int = 50, offset: int = 0,
    ) -> Iterator[Report]:
        _require_resolved(identity)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        reports = await self._repo.list_by_owner(identity.id, limit, max(offset, 0))
        return iter(reports)
