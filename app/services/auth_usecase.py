"""Auth Usecase: bridges an untrusted bearer credential into a trusted Identity.

Invariants:
    - Per request: UNVERIFIED → VERIFYING → {RESOLVED, REJECTED}
    - Missing credential is REJECTED without calling the verifier
    - Verification failure is REJECTED and touches no repository method
    - First-seen subject creates exactly one Identity: a losing INSERT (ConflictError)
      re-reads instead of failing, bounded by max_resolve_attempts
    - Metadata refresh only: external_id is never changed

Design Decisions:
    - Uniqueness enforced by the store constraint plus create-or-fetch retry,
      not by locks (ADR: no shared mutable state between requests)
    - display_name from claims only fills an empty value, so a profile edit
      made through update_profile survives later sign-ins
"""

import logging
from dataclasses import replace

from app.core.domain_types import AuthState
from app.core.entities import Claims, Identity, ProfilePatch, clip_display_name
from app.core.errors import (
    ConflictError, IdentityProviderError, IdentityResolutionError,
    UnauthenticatedError,
)
from app.core.repository_protocols import AuthRepository, IdentityVerifier

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESOLVE_ATTEMPTS = 3


class AuthUseCase:
    """Verifies credentials and resolves them to persisted identities."""

    def __init__(
        self,
        repo: AuthRepository,
        verifier: IdentityVerifier,
        max_resolve_attempts: int = DEFAULT_MAX_RESOLVE_ATTEMPTS,
    ):
        self._repo = repo
        self._verifier = verifier
        self._max_resolve_attempts = max(1, max_resolve_attempts)

    async def resolve(self, credential: str | None) -> Identity:
        """Verify the credential once and return the (possibly new) Identity."""
        claims = await self._verify(credential)
        identity = await self._find_or_create(claims)
        identity = await self._refresh_metadata(identity, claims)
        logger.debug(
            "Identity resolved",
            extra={"identity_id": identity.id, "auth_state": AuthState.RESOLVED.value},
        )
        return identity

    async def update_profile(
        self, credential: str | None, patch: ProfilePatch,
    ) -> Identity:
        """Let the resolved identity edit its own display metadata."""
        identity = await self.resolve(credential)
        if patch.display_name is None or patch.display_name == identity.display_name:
            return identity
        return await self._repo.update(
            replace(identity, display_name=patch.display_name),
        )

    async def _verify(self, credential: str | None) -> Claims:
        if not credential:
            self._log_rejected("missing credential")
            raise UnauthenticatedError("Missing credential")
        try:
            return await self._verifier.verify(credential)
        except (UnauthenticatedError, IdentityProviderError) as exc:
            self._log_rejected(exc.code)
            raise
        except Exception as exc:
            # any other verifier outcome is still an authentication failure
            self._log_rejected(type(exc).__name__)
            raise UnauthenticatedError("Invalid credential") from exc

    async def _find_or_create(self, claims: Claims) -> Identity:
        for attempt in range(1, self._max_resolve_attempts + 1):
            identity = await self._repo.find_by_external_id(claims.subject_id)
            if identity is not None:
                return identity
            try:
                created = await self._repo.create(Identity.from_claims(claims))
            except ConflictError:
                logger.info(
                    "Concurrent first sign-in detected, re-reading identity",
                    extra={"attempt": attempt},
                )
                continue
            logger.info("Identity created", extra={"identity_id": created.id})
            return created
        raise IdentityResolutionError(self._max_resolve_attempts)

    async def _refresh_metadata(self, identity: Identity, claims: Claims) -> Identity:
        email = claims.email if claims.email is not None else identity.email
        display_name = identity.display_name or clip_display_name(claims.display_name)
        if email == identity.email and display_name == identity.display_name:
            return identity
        return await self._repo.update(
            replace(identity, email=email, display_name=display_name),
        )

    @staticmethod
    def _log_rejected(reason: str) -> None:
        logger.info(
            f"Credential rejected: {reason}",
            extra={"auth_state": AuthState.REJECTED.value},
        )
