"""Report Routes: HTTP binding for ReportInterop under /v2/report.

Invariants:
    - POST → 201, DELETE → 204, everything else 200 on success
    - Foreign and missing report ids both answer 404
    - Routes never contain business logic (delegate to interop)
"""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_container, get_request_context, outcome_response
from app.container import Container
from app.interop.base import RequestContext
from app.schemas.report import ReportCreate, ReportListQuery, ReportUpdate

router = APIRouter(prefix="/v2/report", tags=["report"])


@router.post("", status_code=201)
async def create_report(
    body: ReportCreate,
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    """Create a report owned by the caller."""
    return outcome_response(await container.report_interop.create(ctx, body))


@router.get("")
async def list_reports(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    """List the caller's reports, newest first."""
    query = ReportListQuery(limit=limit, offset=offset)
    return outcome_response(await container.report_interop.list_mine(ctx, query))


@router.get("/{report_id}")
async def get_report(
    report_id: int,
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    return outcome_response(await container.report_interop.get(ctx, report_id))


@router.patch("/{report_id}")
async def update_report(
    report_id: int,
    body: ReportUpdate,
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    return outcome_response(
        await container.report_interop.update(ctx, report_id, body),
    )


@router.delete("/{report_id}", status_code=204)
async def delete_report(
    report_id: int,
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    return outcome_response(await container.report_interop.delete(ctx, report_id))
