"""Report Repository: SQLite-backed report persistence.

Tests cover:
    - create/get round trip keeps owner_id and pending status
    - list_by_owner filters by owner, newest first, honours limit/offset
    - update/delete of unknown ids raise ResourceNotFoundError
    - ids beyond the Integer key range behave as absent
    - create for an owner with no identity row raises NotFound(Identity)
"""

import pytest
from dataclasses import replace

from app.core.domain_types import IdentityId, ReportId, ReportStatus, SubjectId
from app.core.entities import Identity, Report
from app.core.errors import ResourceNotFoundError


@pytest.fixture
async def owners(auth_repo):
    first = await auth_repo.create(Identity(external_id=SubjectId("sub-1")))
    second = await auth_repo.create(Identity(external_id=SubjectId("sub-2")))
    return first, second


async def test_create_then_get(report_repo, owners):
    owner, _ = owners
    created = await report_repo.create(Report(owner_id=owner.id, content="draft"))
    fetched = await report_repo.get_by_id(created.id)
    assert fetched == created
    assert fetched.owner_id == owner.id
    assert fetched.status == ReportStatus.PENDING


async def test_get_missing_returns_none(report_repo):
    assert await report_repo.get_by_id(ReportId(404)) is None


async def test_list_by_owner_newest_first(report_repo, owners):
    owner, other = owners
    ids = [
        (await report_repo.create(Report(owner_id=owner.id, content=f"r{i}"))).id
        for i in range(3)
    ]
    await report_repo.create(Report(owner_id=other.id, content="foreign"))

    listed = await report_repo.list_by_owner(owner.id, limit=10, offset=0)
    assert [r.id for r in listed] == list(reversed(ids))
    assert all(r.owner_id == owner.id for r in listed)


async def test_list_by_owner_paginates(report_repo, owners):
    owner, _ = owners
    for i in range(5):
        await report_repo.create(Report(owner_id=owner.id, content=f"r{i}"))
    page = await report_repo.list_by_owner(owner.id, limit=2, offset=1)
    assert [r.content for r in page] == ["r3", "r2"]


async def test_update_persists_changes(report_repo, owners):
    owner, _ = owners
    created = await report_repo.create(Report(owner_id=owner.id, content="draft"))
    updated = await report_repo.update(
        replace(created, content="final", status=ReportStatus.RESOLVED),
    )
    assert updated.content == "final"
    assert (await report_repo.get_by_id(created.id)).status == ReportStatus.RESOLVED


async def test_update_missing_raises_not_found(report_repo):
    ghost = Report(owner_id=IdentityId(1), content="x", id=ReportId(404))
    with pytest.raises(ResourceNotFoundError):
        await report_repo.update(ghost)


async def test_delete_removes_row(report_repo, owners):
    owner, _ = owners
    created = await report_repo.create(Report(owner_id=owner.id, content="draft"))
    await report_repo.delete(created.id)
    assert await report_repo.get_by_id(created.id) is None


async def test_delete_missing_raises_not_found(report_repo):
    with pytest.raises(ResourceNotFoundError):
        await report_repo.delete(ReportId(404))


async def test_create_for_unknown_owner_raises_identity_not_found(report_repo):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await report_repo.create(Report(owner_id=IdentityId(999), content="orphan"))
    assert exc_info.value.resource_type == "Identity"
    assert exc_info.value.resource_id == "999"


async def test_unknown_owner_leaves_no_row(report_repo, owners):
    owner, _ = owners
    with pytest.raises(ResourceNotFoundError):
        await report_repo.create(Report(owner_id=IdentityId(999), content="orphan"))
    assert await report_repo.list_by_owner(IdentityId(999)) == []
    assert await report_repo.list_by_owner(owner.id) == []


@pytest.mark.parametrize("report_id", [2**31, 3_000_000_000, 2**63])
async def test_out_of_range_ids_are_absent(report_repo, report_id):
    assert await report_repo.get_by_id(ReportId(report_id)) is None
    with pytest.raises(ResourceNotFoundError):
        await report_repo.delete(ReportId(report_id))
    with pytest.raises(ResourceNotFoundError):
        await report_repo.update(
            Report(owner_id=IdentityId(1), content="x", id=ReportId(report_id)),
        )
