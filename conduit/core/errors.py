"""Error Hierarchy — typed, categorized exceptions for all Conduit failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages
    - InvalidCredentialsError never says whether the email or the password was wrong

Design Decisions:
    - Single hierarchy with ConduitError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - One class per error kind (DuplicateEmail vs DuplicateUsername) so callers
      branch on type, never on message text
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class ConduitError(Exception):
    """Base exception for all Conduit errors."""

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
                    "resource": self.context.resource,
                    "retry_after_ms": self.context.retry_after_ms,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(ConduitError):
    """Requested entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateEmailError(ConduitError):
    """Signup or update collided with the users.email unique constraint."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "Email is already taken",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.email = email


class DuplicateUsernameError(ConduitError):
    """Signup or update collided with the users.username unique constraint."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        super().__init__(
            f"Username '{username}' is already taken",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.username = username


class InvalidCredentialsError(ConduitError):
    """Signin failed. Deliberately silent about which half was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Email or password is invalid",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AlreadyFollowingError(ConduitError):
    """Follow edge already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Already following this user",
            "ALREADY_FOLLOWING", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class SelfFollowError(ConduitError):
    """A user tried to follow themselves."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Users cannot follow themselves",
            "SELF_FOLLOW", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class AlreadyFavoritedError(ConduitError):
    """Favorite edge already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Article is already favorited",
            "ALREADY_FAVORITED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class CredentialError(ConduitError):
    """Password hashing primitive rejected the input."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CREDENTIAL_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class TokenError(ConduitError):
    """Base for session token failures."""


class InvalidTokenError(TokenError):
    """Token signature, format or subject is bad."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Session token is invalid",
            "INVALID_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ExpiredTokenError(TokenError):
    """Token is past its exp claim."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Session token has expired",
            "EXPIRED_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class TokenSigningError(TokenError):
    """Signing key unavailable."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Session token signing key is not configured",
            "TOKEN_SIGNING_UNAVAILABLE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class StorageError(ConduitError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class PoolTimeoutError(ConduitError):
    """No pooled connection became available within the pool timeout."""
    def __init__(self, timeout_seconds: float | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if timeout_seconds is not None:
            ctx.retry_after_ms = int(timeout_seconds * 1000)
        super().__init__(
            "Database connection pool exhausted",
            "POOL_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
