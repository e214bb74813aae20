"""Report Interop: maps report requests onto AuthUseCase + ReportUseCase.

Invariants:
    - Every call resolves the caller first (verify → resolve → authorize → act)
    - Results rendered with ReportResponse; lists wrapped with pagination echo
"""

from app.core.domain_types import ReportId
from app.core.outcome import Outcome
from app.interop.base import RequestContext, run_to_outcome
from app.schemas.report import (
    ReportCreate, ReportListQuery, ReportResponse, ReportUpdate,
)
from app.services.auth_usecase import AuthUseCase
from app.services.report_usecase import ReportUseCase


def _present(report) -> dict:
    return ReportResponse.from_entity(report).model_dump(mode="json")


class ReportInterop:
    """Transport-neutral entry points for the report domain."""

    def __init__(self, auth: AuthUseCase, reports: ReportUseCase):
        self._auth = auth
        self._reports = reports

    async def create(self, ctx: RequestContext, body: ReportCreate) -> Outcome:
        async def call():
            identity = await self._auth.resolve(ctx.credential)
            return await self._reports.create_report(identity, body.to_draft())

        return await run_to_outcome(ctx, call, _present, success_status=201)

    async def get(self, ctx: RequestContext, report_id: int) -> Outcome:
        async def call():
            identity = await self._auth.resolve(ctx.credential)
            return await self._reports.get_report(identity, ReportId(report_id))

        return await run_to_outcome(ctx, call, _present)

    async def update(
        self, ctx: RequestContext, report_id: int, body: ReportUpdate,
    ) -> Outcome:
        async def call():
            identity = await self._auth.resolve(ctx.credential)
            return await self._reports.update_report(
                identity, ReportId(report_id), body.to_patch(),
            )

        return await run_to_outcome(ctx, call, _present)

    async def delete(self, ctx: RequestContext, report_id: int) -> Outcome:
        async def call():
            identity = await self._auth.resolve(ctx.credential)
            await self._reports.delete_report(identity, ReportId(report_id))

        return await run_to_outcome(
            ctx, call, lambda _: None, success_status=204,
        )

    async def list_mine(self, ctx: RequestContext, query: ReportListQuery) -> Outcome:
        async def call():
            identity = await self._auth.resolve(ctx.credential)
            return await self._reports.list_my_reports(
                identity, query.limit, query.offset,
            )

        return await run_to_outcome(
            ctx,
            call,
            lambda reports: {
                "reports": [_present(r) for r in reports],
                "pagination": {"limit": query.limit, "offset": query.offset},
            },
        )
