"""Composition Root: wires Repository → Usecase → Interop once per process.

Invariants:
    - Built exactly once (FastAPI lifespan or test fixture), then passed by reference
    - Every layer receives only the narrow capability it needs
    - The DatabaseSessionManager and IdentityVerifier are the only shared resources

Design Decisions:
    - Plain dataclass over a DI framework or service locator: every edge visible here
      (ADR: explicit registration, no auto-discovery)
"""

from dataclasses import dataclass

from app.core.repository_protocols import IdentityVerifier
from app.infrastructure.database import DatabaseSessionManager
from app.interop.auth import AuthInterop
from app.interop.report import ReportInterop
from app.repositories.auth_repository import SqlAuthRepository
from app.repositories.report_repository import SqlReportRepository
from app.services.auth_usecase import AuthUseCase, DEFAULT_MAX_RESOLVE_ATTEMPTS
from app.services.report_usecase import ReportUseCase


@dataclass(frozen=True)
class Container:
    """Process-wide wiring handed to Delivery."""
    db: DatabaseSessionManager
    verifier: IdentityVerifier
    auth_interop: AuthInterop
    report_interop: ReportInterop
    request_timeout_seconds: float | None = None


def build_container(
    db: DatabaseSessionManager,
    verifier: IdentityVerifier,
    identity_resolve_max_attempts: int = DEFAULT_MAX_RESOLVE_ATTEMPTS,
    request_timeout_seconds: float | None = None,
) -> Container:
    auth_repo = SqlAuthRepository(db)
    report_repo = SqlReportRepository(db)

    auth_usecase = AuthUseCase(
        auth_repo, verifier, max_resolve_attempts=identity_resolve_max_attempts,
    )
    report_usecase = ReportUseCase(report_repo)

    return Container(
        db=db,
        verifier=verifier,
        auth_interop=AuthInterop(auth_usecase),
        report_interop=ReportInterop(auth_usecase, report_usecase),
        request_timeout_seconds=request_timeout_seconds,
    )
