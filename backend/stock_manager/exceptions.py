"""
Stock Manager Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the store-side error kinds of the API.
Why:   Routes stay free of try/except; global handlers registered in
       main.py translate each type into its status code and body.
How:   Each exception carries a message and optional context dict.
Who:   Raised by services; caught by global handlers.

Request validation (bad bodies, malformed path UUIDs) is left to FastAPI
and pydantic; main.py maps their RequestValidationError instead.

Exception Hierarchy:
    StockManagerError (base)
    ├── NotFoundError            → 404 {"error": "<Entity> not found"}
    └── StoreError               → 500 {"error": ..., "details": <store message>}

None of these are retried; every error is local to its request.
"""

from typing import Any, Dict, Optional


class StockManagerError(Exception):
    """
    Base exception for all Stock Manager application errors.

    Attributes:
        message:  Client-facing error description
        context:  Additional debug info, logged server-side
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(StockManagerError):
    """
    Raised when an update or delete matched no row.

    The store returns an empty RETURNING set rather than an error, so the
    service layer converts "zero rows" into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class StoreError(StockManagerError):
    """
    Raised when the backing store rejects or fails a statement.

    What:    Constraint violation, bad foreign key, connectivity loss, syntax error.
    HTTP:    500 Internal Server Error

    The store's own message is kept in `details` and returned to the client
    alongside the action that failed (e.g. "Failed to create component").
    Transient and permanent failures are not distinguished.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.details = details
