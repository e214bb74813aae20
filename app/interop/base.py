"""Interop Runner: deadline and error-to-Outcome mapping shared by every adapter.

Invariants:
    - Deadline elapsed → in-flight call cancelled, Outcome kind INTERNAL (DEADLINE_EXCEEDED)
    - A TimeoutError raised by the call itself with no deadline set is a plain
      internal failure, never DEADLINE_EXCEEDED
    - ImagoError → Outcome.from_error (category mapping in core/outcome.py)
    - Any other exception → logged with traceback, generic INTERNAL Outcome
    - asyncio.CancelledError is never converted (caller disconnects propagate)

Design Decisions:
    - asyncio.wait_for over manual timers: cancellation reaches the DB session
      context manager, which rolls back and releases the connection
"""

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from app.core.errors import ImagoError, RequestTimeoutError, ErrorContext
from app.core.outcome import Outcome

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RequestContext:
    """Normalized per-request inputs handed over by Delivery."""
    credential: str | None
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timeout_seconds: float | None = None


async def _await_with_deadline(
    ctx: RequestContext, call: Callable[[], Awaitable[T]],
) -> T:
    if ctx.timeout_seconds is None:
        return await call()
    try:
        return await asyncio.wait_for(call(), timeout=ctx.timeout_seconds)
    except asyncio.TimeoutError as exc:
        timeout = RequestTimeoutError(
            ctx.timeout_seconds, ErrorContext(request_id=ctx.request_id),
        )
        logger.warning(
            timeout.message,
            extra={"request_id": ctx.request_id, "error_code": timeout.code},
        )
        raise timeout from exc


async def run_to_outcome(
    ctx: RequestContext,
    call: Callable[[], Awaitable[T]],
    present: Callable[[T], Any],
    success_status: int = 200,
) -> Outcome:
    """Await call() under the context deadline and classify the result."""
    try:
        result = await _await_with_deadline(ctx, call)
    except ImagoError as exc:
        exc.context.request_id = exc.context.request_id or ctx.request_id
        logger.info(
            f"{exc.code}: {exc.message}",
            extra={"request_id": ctx.request_id, "error_code": exc.code},
        )
        return Outcome.from_error(exc)
    except Exception as exc:
        logger.error(
            f"Unhandled exception in interop: {exc}",
            exc_info=True,
            extra={"request_id": ctx.request_id},
        )
        return Outcome.internal()
    return Outcome.success(present(result), http_status=success_status)
