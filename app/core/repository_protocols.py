"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via explicit composition (app/container.py)
    - Repositories surface only ResourceNotFoundError / ConflictError / DatabaseError
    - IdentityVerifier surfaces only UnauthenticatedError / IdentityProviderError

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: every boundary method does IO and is a suspension point
"""

from typing import Protocol

from app.core.domain_types import IdentityId, ReportId, SubjectId
from app.core.entities import Claims, Identity, Report


class IdentityVerifier(Protocol):
    """Contract for the external token authority: one narrow method."""
    async def verify(self, credential: str) -> Claims: ...


class AuthRepository(Protocol):
    """Contract for identity persistence: implemented by shell."""
    async def find_by_external_id(self, subject_id: SubjectId) -> Identity | None: ...
    async def create(self, identity: Identity) -> Identity: ...
    async def update(self, identity: Identity) -> Identity: ...


class ReportRepository(Protocol):
    """Contract for report persistence: implemented by shell."""
    async def create(self, report: Report) -> Report: ...
    async def get_by_id(self, report_id: ReportId) -> Report | None: ...
    async def list_by_owner(
        self, owner_id: IdentityId, limit: int, offset: int,
    ) -> list[Report]: ...
    async def update(self, report: Report) -> Report: ...
    async def delete(self, report_id: ReportId) -> None: ...
