"""Interop: Usecase results and failures become exactly one Outcome.

Tests cover:
    - success payloads are rendered JSON-ready dicts
    - each error category maps onto its OutcomeKind
    - unexpected exceptions become a generic INTERNAL outcome
    - an elapsed deadline becomes INTERNAL with DEADLINE_EXCEEDED
"""

import asyncio

import pytest

from app.core.domain_types import OutcomeKind
from app.core.errors import ConflictError
from app.interop.base import RequestContext, run_to_outcome
from app.schemas.auth import ProfileUpdate
from app.schemas.report import ReportCreate, ReportListQuery, ReportUpdate


@pytest.fixture
def token(verifier):
    return verifier.issue("token-1", "sub-1")


@pytest.fixture
def other_token(verifier):
    return verifier.issue("token-2", "sub-2")


async def test_resolve_ok_payload(container, token):
    outcome = await container.auth_interop.resolve(RequestContext(credential=token))
    assert outcome.kind == OutcomeKind.OK
    assert outcome.payload["id"] == 1
    assert outcome.payload["external_id"] == "sub-1"


async def test_resolve_without_credential_is_unauthenticated(container):
    outcome = await container.auth_interop.resolve(RequestContext(credential=None))
    assert outcome.kind == OutcomeKind.UNAUTHENTICATED
    assert outcome.http_status == 401
    assert outcome.error["error"]["code"] == "UNAUTHENTICATED"


async def test_update_profile_ok(container, token):
    outcome = await container.auth_interop.update_profile(
        RequestContext(credential=token), ProfileUpdate(display_name="Ada"),
    )
    assert outcome.ok
    assert outcome.payload["display_name"] == "Ada"


async def test_report_create_is_201(container, token):
    outcome = await container.report_interop.create(
        RequestContext(credential=token), ReportCreate(content="draft"),
    )
    assert outcome.ok
    assert outcome.http_status == 201
    assert outcome.payload["owner_id"] == 1
    assert outcome.payload["status"] == "pending"


async def test_report_get_by_other_identity_is_not_found(container, token, other_token):
    created = await container.report_interop.create(
        RequestContext(credential=token), ReportCreate(content="draft"),
    )
    outcome = await container.report_interop.get(
        RequestContext(credential=other_token), created.payload["id"],
    )
    assert outcome.kind == OutcomeKind.NOT_FOUND
    assert outcome.payload is None


async def test_report_update_and_list(container, token):
    ctx = RequestContext(credential=token)
    created = await container.report_interop.create(ctx, ReportCreate(content="draft"))
    updated = await container.report_interop.update(
        ctx, created.payload["id"], ReportUpdate(status="resolved"),
    )
    assert updated.payload["status"] == "resolved"

    listing = await container.report_interop.list_mine(ctx, ReportListQuery(limit=5))
    assert listing.ok
    assert [r["id"] for r in listing.payload["reports"]] == [created.payload["id"]]
    assert listing.payload["pagination"] == {"limit": 5, "offset": 0}


async def test_report_delete_is_204_without_payload(container, token):
    ctx = RequestContext(credential=token)
    created = await container.report_interop.create(ctx, ReportCreate(content="draft"))
    outcome = await container.report_interop.delete(ctx, created.payload["id"])
    assert outcome.ok
    assert outcome.http_status == 204
    assert outcome.payload is None


async def test_report_call_with_bad_credential_is_unauthenticated(container):
    outcome = await container.report_interop.list_mine(
        RequestContext(credential="forged"), ReportListQuery(),
    )
    assert outcome.kind == OutcomeKind.UNAUTHENTICATED


async def test_conflict_maps_to_conflict_kind():
    async def call():
        raise ConflictError("Identity", "sub-1")

    outcome = await run_to_outcome(RequestContext(credential="t"), call, lambda r: r)
    assert outcome.kind == OutcomeKind.CONFLICT
    assert outcome.http_status == 409


async def test_unexpected_exception_is_generic_internal():
    async def call():
        raise RuntimeError("connection string postgres://secret@db")

    outcome = await run_to_outcome(RequestContext(credential="t"), call, lambda r: r)
    assert outcome.kind == OutcomeKind.INTERNAL
    assert "secret" not in str(outcome.error)


async def test_deadline_elapsed_is_internal_timeout():
    async def call():
        await asyncio.sleep(1)

    ctx = RequestContext(credential="t", request_id="req-9", timeout_seconds=0.01)
    outcome = await run_to_outcome(ctx, call, lambda r: r)
    assert outcome.kind == OutcomeKind.INTERNAL
    assert outcome.http_status == 504
    assert outcome.error["error"]["code"] == "DEADLINE_EXCEEDED"
    assert outcome.error["error"]["context"]["request_id"] == "req-9"


async def test_timeout_error_without_deadline_is_generic_internal():
    async def call():
        raise TimeoutError("driver read timed out")

    outcome = await run_to_outcome(RequestContext(credential="t"), call, lambda r: r)
    assert outcome.kind == OutcomeKind.INTERNAL
    assert outcome.http_status == 500
    assert outcome.error["error"]["code"] == "INTERNAL_ERROR"


async def test_error_outcome_carries_request_id(container):
    ctx = RequestContext(credential="forged", request_id="req-7")
    outcome = await container.auth_interop.resolve(ctx)
    assert outcome.error["error"]["context"]["request_id"] == "req-7"
