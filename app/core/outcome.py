"""Outcome: transport-neutral result of an Interop call.

Invariants:
    - Exactly one Outcome per call: ok carries payload, every other kind carries error
    - ImagoError category → OutcomeKind is total; unknown categories map to INTERNAL
    - Unexpected exceptions never reach the payload (generic internal envelope)

Design Decisions:
    - Pure mapping table over isinstance chains: every mapping visible in one place
    - http_status kept on the Outcome so Delivery needs no second table for 5xx variants
"""

from dataclasses import dataclass
from typing import Any

from app.core.domain_types import OutcomeKind
from app.core.errors import ImagoError, ErrorCategory, ErrorSeverity

_CATEGORY_TO_KIND: dict[ErrorCategory, OutcomeKind] = {
    ErrorCategory.UNAUTHENTICATED: OutcomeKind.UNAUTHENTICATED,
    ErrorCategory.FORBIDDEN: OutcomeKind.FORBIDDEN,
    ErrorCategory.RESOURCE_NOT_FOUND: OutcomeKind.NOT_FOUND,
    ErrorCategory.CONFLICT: OutcomeKind.CONFLICT,
    ErrorCategory.DATABASE: OutcomeKind.INTERNAL,
    ErrorCategory.EXTERNAL_API: OutcomeKind.INTERNAL,
    ErrorCategory.INTERNAL: OutcomeKind.INTERNAL,
    ErrorCategory.TIMEOUT: OutcomeKind.INTERNAL,
}

_INTERNAL_ERROR_BODY = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


@dataclass(frozen=True)
class Outcome:
    """Status classification plus payload or error detail."""
    kind: OutcomeKind
    payload: Any = None
    error: dict | None = None
    http_status: int = 200

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    @classmethod
    def success(cls, payload: Any = None, http_status: int = 200) -> "Outcome":
        return cls(OutcomeKind.OK, payload=payload, http_status=http_status)

    @classmethod
    def from_error(cls, exc: ImagoError) -> "Outcome":
        kind = _CATEGORY_TO_KIND.get(exc.category, OutcomeKind.INTERNAL)
        return cls(kind, error=exc.to_response(), http_status=exc.http_status)

    @classmethod
    def internal(cls) -> "Outcome":
        return cls(OutcomeKind.INTERNAL, error=_INTERNAL_ERROR_BODY, http_status=500)
