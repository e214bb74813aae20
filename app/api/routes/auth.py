"""Auth Routes: HTTP binding for AuthInterop under /v2/auth.

Invariants:
    - GET /me resolves (and on first sight creates) the caller's identity
    - PATCH /me edits display metadata only
    - Routes never contain business logic (delegate to interop)
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_container, get_request_context, outcome_response
from app.container import Container
from app.interop.base import RequestContext
from app.schemas.auth import ProfileUpdate

router = APIRouter(prefix="/v2/auth", tags=["auth"])


@router.get("/me")
async def get_me(
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    """Return the identity bound to the bearer credential."""
    return outcome_response(await container.auth_interop.resolve(ctx))


@router.patch("/me")
async def update_me(
    body: ProfileUpdate,
    ctx: RequestContext = Depends(get_request_context),
    container: Container = Depends(get_container),
):
    """Update the caller's display name."""
    return outcome_response(await container.auth_interop.update_profile(ctx, body))
