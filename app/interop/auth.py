"""Auth Interop: maps identity requests onto AuthUseCase."""

from app.core.outcome import Outcome
from app.interop.base import RequestContext, run_to_outcome
from app.schemas.auth import IdentityResponse, ProfileUpdate
from app.services.auth_usecase import AuthUseCase


def _present(identity) -> dict:
    return IdentityResponse.from_entity(identity).model_dump(mode="json")


class AuthInterop:
    """Transport-neutral entry points for the auth domain."""

    def __init__(self, usecase: AuthUseCase):
        self._usecase = usecase

    async def resolve(self, ctx: RequestContext) -> Outcome:
        """Verify the credential and return the caller's identity."""
        return await run_to_outcome(
            ctx, lambda: self._usecase.resolve(ctx.credential), _present,
        )

    async def update_profile(self, ctx: RequestContext, body: ProfileUpdate) -> Outcome:
        return await run_to_outcome(
            ctx,
            lambda: self._usecase.update_profile(ctx.credential, body.to_patch()),
            _present,
        )
