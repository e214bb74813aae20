"""Ownership Enforcement: pure owner check and the hide-existence policy.

Tests cover:
    - is_owner matches only on identity id
    - require_owned returns the report for its owner
    - absent and foreign reports raise the same ResourceNotFoundError
"""

import pytest

from app.core.domain_types import IdentityId, ReportId, SubjectId
from app.core.entities import Identity, Report
from app.core.enforce_ownership import is_owner, require_owned
from app.core.errors import ResourceNotFoundError


def _identity(identity_id: int | None) -> Identity:
    return Identity(
        external_id=SubjectId(f"sub-{identity_id}"),
        id=IdentityId(identity_id) if identity_id is not None else None,
    )


def _report(owner_id: int) -> Report:
    return Report(owner_id=IdentityId(owner_id), content="draft", id=ReportId(5))


def test_is_owner_true_for_matching_id():
    assert is_owner(_report(1), _identity(1))


def test_is_owner_false_for_other_identity():
    assert not is_owner(_report(1), _identity(2))


def test_is_owner_false_for_unresolved_identity():
    assert not is_owner(_report(1), _identity(None))


def test_require_owned_returns_report():
    report = _report(1)
    assert require_owned(report, _identity(1), ReportId(5)) is report


def test_require_owned_hides_foreign_report():
    with pytest.raises(ResourceNotFoundError) as foreign:
        require_owned(_report(1), _identity(2), ReportId(5))
    with pytest.raises(ResourceNotFoundError) as missing:
        require_owned(None, _identity(2), ReportId(5))
    assert foreign.value.message == missing.value.message
    assert foreign.value.code == missing.value.code
