"""Error Hierarchy: typed, categorized exceptions for all Circles failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) never reach the store; store errors are 500-level
    - to_response() produces the REST envelope
    - No driver details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CircleError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data travels with the error,
      not with the logger
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    circle_id: int | None = None
    field_name: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CircleError(Exception):
    """Base exception for all Circles errors."""

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
                    "circle_id": self.context.circle_id,
                    "field": self.context.field_name,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(CircleError):
    """Domain value rejected at construction time."""
    def __init__(
        self, message: str, field: str, error_code: str = "VALIDATION_ERROR",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            message, error_code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field

    @classmethod
    def from_check(cls, check: dict) -> "ValidationError":
        """Build from an enforce_circle error descriptor."""
        return cls(check["message"], check["field"], check["error_code"])


class NotFoundError(CircleError):
    """Requested circle does not exist."""
    def __init__(self, circle_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.circle_id = circle_id
        super().__init__(
            "Circle not found",
            "CIRCLE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.circle_id = circle_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DataIntegrityError(CircleError):
    """Stored rows do not form a valid aggregate (e.g. owner row missing)."""
    def __init__(self, message: str, circle_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.circle_id = circle_id
        super().__init__(
            message, "DATA_INTEGRITY_ERROR", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.circle_id = circle_id


class StoreError(CircleError):
    """Database operation failed."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
