"""Error Hierarchy: typed, categorized exceptions for all Imago failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by both Interop and FastAPI handlers
    - No internal details leaked in user-facing messages (driver text stays in logs)

Design Decisions:
    - Single hierarchy with ImagoError base: Interop and the FastAPI global handler
      both dispatch on category (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    identity_id: int | None = None
    resource_id: str | None = None


class ImagoError(Exception):
    """Base exception for all Imago errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "request_id": self.context.request_id,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(ImagoError):
    """Credential missing, malformed, expired or otherwise unverifiable."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.UNAUTHENTICATED,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(ImagoError):
    """Authenticated caller is not entitled to act on the resource."""
    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Not allowed to access {resource_type} '{resource_id}'",
            "FORBIDDEN", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(ImagoError):
    """Requested resource does not exist (or is hidden from the caller)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(ImagoError):
    """Uniqueness constraint violated on create."""
    def __init__(
        self, resource_type: str, key: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{key}' already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.resource_type = resource_type
        self.key = key


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ImagoError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class IdentityProviderError(ImagoError):
    """Token authority unreachable or returned an unusable key set."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Identity provider error: {message}",
            "IDENTITY_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )


class IdentityResolutionError(ImagoError):
    """Create-or-fetch of an identity did not converge."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not resolve identity after {attempts} attempts",
            "IDENTITY_RESOLUTION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.attempts = attempts


class RequestTimeoutError(ImagoError):
    """Request deadline elapsed before the operation completed."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Operation exceeded deadline of {timeout_seconds}s",
            "DEADLINE_EXCEEDED", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, context, 504,
        )
        self.timeout_seconds = timeout_seconds
