"""Error Hierarchy - typed, categorized exceptions for all FieldHub failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) carry the collection/field they concern when known
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FieldHubError base: one global handler catches all
    - Errors from the Schema Service cross the controller unchanged (no re-wrapping)
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
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class FieldHubError(Exception):
    """Base exception for all FieldHub errors."""

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
                    "collection": self.context.collection,
                    "field": self.context.field_name,
                },
            }
        }


def _context_for(
    collection: str | None, field_name: str | None = None,
) -> ErrorContext:
    return ErrorContext(collection=collection, field_name=field_name)


# --- Client Errors (400-level) ----------------------------------

class PayloadValidationError(FieldHubError):
    """Request payload missing, empty, or of the wrong shape."""
    def __init__(self, message: str = "Payload cannot be empty", context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class UnauthorizedError(FieldHubError):
    """Caller lacks permission for the requested operation."""
    def __init__(self, action: str, collection: str | None = None):
        super().__init__(
            f"Not allowed to {action}",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, _context_for(collection), 401,
        )
        self.action = action


class SystemCollectionProtectedError(FieldHubError):
    """Batch mutation attempted against a system collection."""
    def __init__(self, collection: str):
        super().__init__(
            f"Collection '{collection}' is a system collection and cannot be batch updated",
            "SYSTEM_COLLECTION_PROTECTED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.ERROR, _context_for(collection), 403,
        )


class CollectionNotFoundError(FieldHubError):
    """Named collection does not exist."""
    def __init__(self, collection: str):
        super().__init__(
            f"Collection '{collection}' not found",
            "COLLECTION_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, _context_for(collection), 404,
        )


class FieldNotFoundError(FieldHubError):
    """Named field does not exist in the collection."""
    def __init__(self, collection: str, field_name: str):
        super().__init__(
            f"Field '{field_name}' not found in collection '{collection}'",
            "FIELD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, _context_for(collection, field_name), 404,
        )


class FieldAlreadyExistsError(FieldHubError):
    """A field with the same name already exists in the collection."""
    def __init__(self, collection: str, field_name: str):
        super().__init__(
            f"Field '{field_name}' already exists in collection '{collection}'",
            "FIELD_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, _context_for(collection, field_name), 409,
        )


class FieldOperationError(FieldHubError):
    """Any other rejected field operation (unknown attribute, rename, bad value)."""
    def __init__(
        self, message: str, collection: str | None = None, field_name: str | None = None,
    ):
        super().__init__(
            message, "FIELD_OPERATION_FAILED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, _context_for(collection, field_name), 422,
        )


# --- Infrastructure Errors (500-level) --------------------------

class DatabaseError(FieldHubError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
