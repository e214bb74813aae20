"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - IdentityId, ReportId wrap store-assigned integers: never mix them up
    - SubjectId wraps the identity provider's `sub` claim (opaque string)
    - All valid states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

IdentityId = NewType("IdentityId", int)
ReportId = NewType("ReportId", int)
SubjectId = NewType("SubjectId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ReportStatus(str, Enum):
    """Report lifecycle states: maps to DB `status` column."""
    PENDING = "pending"
    IN_REVIEW = "in_review"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


INITIAL_REPORT_STATUS = ReportStatus.PENDING


class AuthState(str, Enum):
    """Per-request authentication state machine."""
    UNVERIFIED = "unverified"
    VERIFYING = "verifying"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class OutcomeKind(str, Enum):
    """Closed set of transport-neutral results produced by Interop."""
    OK = "ok"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"
