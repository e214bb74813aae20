"""Route Dependencies: container lookup, request context, Outcome rendering.

Invariants:
    - Credential read from `Authorization: Bearer <token>` only; absent → None
      (AuthUseCase decides that None is Unauthenticated)
    - request_id taken from X-Request-ID when supplied, otherwise generated
    - outcome_response is the only place Outcome becomes an HTTP response

Design Decisions:
    - Container read from app.state: built once in lifespan, swapped in tests
"""

import uuid

from fastapi import Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.container import Container
from app.core.outcome import Outcome
from app.interop.base import RequestContext

bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> Container:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container not initialized")
    return container


def get_request_context(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> RequestContext:
    return RequestContext(
        credential=credentials.credentials if credentials else None,
        request_id=request.headers.get("x-request-id") or uuid.uuid4().hex,
        timeout_seconds=container.request_timeout_seconds,
    )


def outcome_response(outcome: Outcome) -> Response:
    """Render an Outcome: payload on success, error envelope otherwise."""
    if not outcome.ok:
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if outcome.http_status == status.HTTP_401_UNAUTHORIZED else None
        )
        return JSONResponse(
            status_code=outcome.http_status, content=outcome.error, headers=headers,
        )
    if outcome.http_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return JSONResponse(status_code=outcome.http_status, content=outcome.payload)
