"""Auth Repository: identity persistence keyed by provider subject id.

Invariants:
    - create() raises ConflictError when external_id already exists (unique constraint)
    - update() raises ResourceNotFoundError when the id does not exist
    - update() never rewrites external_id
    - No cross-domain writes

Design Decisions:
    - IntegrityError caught at commit inside the session block: the conflict is
      expected under concurrent first-seen requests and must not become DatabaseError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.domain_types import IdentityId, SubjectId
from app.core.entities import Identity
from app.core.errors import ConflictError, ResourceNotFoundError
from app.infrastructure.database import DatabaseSessionManager
from app.models.identity import IdentityModel

logger = logging.getLogger(__name__)


def _to_entity(row: IdentityModel) -> Identity:
    return Identity(
        id=IdentityId(row.id),
        external_id=SubjectId(row.external_id),
        email=row.email,
        display_name=row.display_name,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAuthRepository:
    """AuthRepository backed by the `identities` table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def find_by_external_id(self, subject_id: SubjectId) -> Identity | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(IdentityModel).where(IdentityModel.external_id == subject_id),
            )
            row = result.scalar_one_or_none()
            return _to_entity(row) if row else None

    async def create(self, identity: Identity) -> Identity:
        async with self._db.session() as session:
            row = IdentityModel(
                external_id=identity.external_id,
                email=identity.email,
                display_name=identity.display_name,
            )
            session.add(row)
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.info(
                    "Identity insert lost uniqueness race",
                    extra={"error_code": "CONFLICT"},
                )
                raise ConflictError("Identity", identity.external_id)
            await session.refresh(row)
            return _to_entity(row)

    async def update(self, identity: Identity) -> Identity:
        if identity.id is None:
            raise ResourceNotFoundError("Identity", "None")
        async with self._db.session() as session:
            row = await session.get(IdentityModel, identity.id)
            if row is None:
                raise ResourceNotFoundError("Identity", str(identity.id))
            row.email = identity.email
            row.display_name = identity.display_name
            await session.commit()
            await session.refresh(row)
            return _to_entity(row)
