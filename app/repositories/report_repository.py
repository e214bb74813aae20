"""Report Repository: report persistence keyed by internal id.

Invariants:
    - get_by_id() returns None when absent; update()/delete() raise ResourceNotFoundError
    - Ids outside the Integer key range are absent: they never reach the driver
    - Every returned Report carries owner_id (authorization happens in the Usecase)
    - list_by_owner() orders newest first, ties broken by id descending
    - create() with an unknown owner raises ResourceNotFoundError("Identity", ...)

Design Decisions:
    - No owner filter on get/update/delete: the store enforces referential integrity
      only, never "who may act" (ADR: ownership split across layers)
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.domain_types import IdentityId, ReportId, ReportStatus
from app.core.entities import Report
from app.core.errors import ResourceNotFoundError
from app.db.base import is_storable_id
from app.infrastructure.database import DatabaseSessionManager
from app.models.report import ReportModel

logger = logging.getLogger(__name__)


def _to_entity(row: ReportModel) -> Report:
    return Report(
        id=ReportId(row.id),
        owner_id=IdentityId(row.owner_id),
        title=row.title,
        content=row.content,
        status=ReportStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlReportRepository:
    """ReportRepository backed by the `reports` table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, report: Report) -> Report:
        async with self._db.session() as session:
            row = ReportModel(
                owner_id=report.owner_id,
                title=report.title,
                content=report.content,
                status=report.status.value,
            )
            session.add(row)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                raise ResourceNotFoundError("Identity", str(report.owner_id))
            await session.refresh(row)
            logger.info("Report created", extra={"report_id": row.id})
            return _to_entity(row)

    async def get_by_id(self, report_id: ReportId) -> Report | None:
        if not is_storable_id(report_id):
            return None
        async with self._db.session() as session:
            row = await session.get(ReportModel, report_id)
            return _to_entity(row) if row else None

    async def list_by_owner(
        self, owner_id: IdentityId, limit: int = 50, offset: int = 0,
    ) -> list[Report]:
        async with self._db.session() as session:
            result = await session.execute(
                select(ReportModel)
                .where(ReportModel.owner_id == owner_id)
                .order_by(ReportModel.created_at.desc(), ReportModel.id.desc())
                .limit(limit)
                .offset(offset),
            )
            return [_to_entity(row) for row in result.scalars().all()]

    async def update(self, report: Report) -> Report:
        if report.id is None or not is_storable_id(report.id):
            raise ResourceNotFoundError("Report", str(report.id))
        async with self._db.session() as session:
            row = await session.get(ReportModel, report.id)
            if row is None:
                raise ResourceNotFoundError("Report", str(report.id))
            row.title = report.title
            row.content = report.content
            row.status = report.status.value
            await session.commit()
            await session.refresh(row)
            return _to_entity(row)

    async def delete(self, report_id: ReportId) -> None:
        if not is_storable_id(report_id):
            raise ResourceNotFoundError("Report", str(report_id))
        async with self._db.session() as session:
            row = await session.get(ReportModel, report_id)
            if row is None:
                raise ResourceNotFoundError("Report", str(report_id))
            await session.delete(row)
            await session.commit()
            logger.info("Report deleted", extra={"report_id": report_id})
