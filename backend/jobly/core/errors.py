"""Error Hierarchy — typed, categorized exceptions for every Jobly failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Each variant carries the data the HTTP layer needs (field, messages, resource id)
    - Client errors (400-level) never reach the catch-all handler
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Closed set of subclasses under JoblyError: one global handler shapes all of them
    - http_status lives on the error, so routes never map errors to status codes
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    details: list[Any] | None = None


class JoblyError(Exception):
    """Base exception for all Jobly errors."""

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
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.details is not None:
            body["details"] = self.context.details
        return {"error": body}


# ─── Client Errors (400-level) ──────────────────────────────────

class EmptyInputError(JoblyError):
    """Fragment builder invoked with no fields or criteria."""
    def __init__(self, message: str = "No data", context: ErrorContext | None = None):
        super().__init__(
            message, "EMPTY_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class NotANumberError(JoblyError):
    """A numeric filter value could not be parsed."""
    def __init__(self, field: str, reason: str | None = None, context: ErrorContext | None = None):
        message = f"{field} is not a number"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message, "NOT_A_NUMBER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class RangeError(JoblyError):
    """Lower bound exceeds upper bound."""
    def __init__(
        self,
        message: str = "minEmployees must not exceed maxEmployees",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ValidationError(JoblyError):
    """Payload failed its JSON schema. Carries every message, in order."""
    def __init__(self, messages: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.details = list(messages)
        super().__init__(
            "; ".join(messages) or "Invalid request data",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.messages = list(messages)


class DuplicateError(JoblyError):
    """Create attempted for a resource key that already exists."""
    def __init__(self, resource_type: str, resource_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Duplicate {resource_type.lower()}: {resource_id}",
            "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnauthorizedError(JoblyError):
    """Caller lacks the capability the route requires."""
    def __init__(self, message: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 401,
        )


class NotFoundError(JoblyError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"No {resource_type.lower()}: {resource_id}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JoblyError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
