"""Error Hierarchy — typed, categorized exceptions for all LinkUp failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope ({"status": "error", ...})
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LinkUpError base: one global handler catches all
    - Missing and foreign-owned resources raise the same ResourceNotFoundError,
      so callers cannot probe other organizers' IDs
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
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response body."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class LinkUpError(Exception):
    """Base exception for all LinkUp errors."""

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
            "status": "error",
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            },
        }


# ─── Request Errors (400/401) ───────────────────────────────────

class InvalidRequestError(LinkUpError):
    """Request is well-formed JSON but semantically invalid."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class AuthenticationError(LinkUpError):
    """Unknown email or wrong password — deliberately indistinguishable."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class BusinessRuleError(LinkUpError):
    """Generic domain rule violation."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


class CouponNotApplicableError(LinkUpError):
    """Coupon exists but cannot be applied right now."""
    def __init__(self, code: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Coupon '{code}' cannot be applied: {reason}",
            "COUPON_NOT_APPLICABLE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(LinkUpError):
    """Requested resource does not exist or is not owned by the caller."""
    def __init__(
        self, resource_type: str, resource_id: str | int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Conflicts (409) ────────────────────────────────────────────

class DuplicateResourceError(LinkUpError):
    """Unique constraint would be violated."""
    def __init__(
        self, resource_type: str, field: str, value: Any,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        super().__init__(
            f"{resource_type} with {field} '{value}' already exists",
            "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.field = field


class InsufficientStockError(LinkUpError):
    """Requested quantity exceeds the variant's stock."""
    def __init__(self, available: int, requested: int, context: ErrorContext | None = None):
        super().__init__(
            f"Insufficient stock: {available} available, {requested} requested",
            "INSUFFICIENT_STOCK", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.available = available
        self.requested = requested


class TicketAlreadyInCartError(LinkUpError):
    """Cart already holds a ticket for this event."""
    def __init__(self, event_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Cart already contains a ticket for event {event_id}",
            "TICKET_ALREADY_IN_CART", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.event_id = event_id


class TicketUnavailableError(LinkUpError):
    """Ticket type is sold out or outside its sale window."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Ticket is not available: {reason}",
            "TICKET_UNAVAILABLE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.reason = reason


class AlreadyCheckedInError(LinkUpError):
    """Guest was already checked in."""
    def __init__(self, guest_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Guest {guest_id} is already checked in",
            "ALREADY_CHECKED_IN", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(LinkUpError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
