"""
Sample API: Custom Exception Hierarchy
========================================

What:  Application-specific exceptions, one per HTTP outcome.
How:   Services raise these; global handlers registered in main.py turn each
       one into a `{"error": <message>}` JSON response.
When:  During request processing, at the single point where a decision is made
       (request validation, affected-row check, statement execution).

Exception Hierarchy:
    SampleAPIError (base)
    ├── ValidationError   → 400 Bad Request (missing or malformed fields)
    ├── NotFoundError     → 404 Not Found (zero rows matched)
    └── StorageError      → 500 Internal Server Error (anything the driver raised)

None of these are retried. Every error ends the request.
"""

from typing import Any, Dict, Optional


class SampleAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Text returned to the client in the `error` field
        context:  Extra detail for server-side logs only
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SampleAPIError):
    """
    Raised when the request body fails a required-field or coercion check.

    HTTP:  400 Bad Request
    When:  Before any storage access, so a rejected request never touches
           the database.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(SampleAPIError):
    """
    Raised when a mutation targets an id with no matching row.

    HTTP:  404 Not Found
    Message format: "<Resource> not found", e.g. "Agent not found".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StorageError(SampleAPIError):
    """
    Raised when the storage engine fails: connectivity, constraint violation,
    pool timeout or malformed SQL.

    HTTP:  500 Internal Server Error
    The message is the underlying driver message, returned to the client
    unchanged.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: BaseException, **context: Any) -> "StorageError":
        """
        Build a StorageError carrying the driver's own message.

        SQLAlchemy wraps DBAPI errors and decorates their text with the SQL
        statement and a documentation link; `orig` holds the driver error.
        """
        orig = getattr(exc, "orig", None)
        message = str(orig) if orig is not None else str(exc)
        context.setdefault("error_type", type(exc).__name__)
        return cls(message=message or type(exc).__name__, context=context)
