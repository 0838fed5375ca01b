"""
ForumGuard Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the few real error scenarios.
Why:   Global handlers in main.py map each class to an HTTP status code,
       so services can raise without knowing anything about HTTP.

Exception Hierarchy:
    ForumGuardError (base)
    ├── InvalidArgumentError   → 400 Bad Request (null/blank username)
    ├── NotFoundError          → 404 Not Found
    └── DatabaseError          → 500 Internal Server Error (collaborator failure)

What is NOT an exception:
    A validator rejection is a normal outcome and is returned as a
    ValidationResult value. A reply whose parent post is missing is logged
    and skipped by the analyzer.
"""

from typing import Any, Dict, Optional


class ForumGuardError(Exception):
    """
    Base exception for all ForumGuard application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for server errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidArgumentError(ForumGuardError):
    """
    Raised when a caller passes an argument the core cannot work with.

    When:    Null or blank username given to the engagement analyzer or the
             reply alert lookup; a missing repository at construction time.
    HTTP:    400 Bad Request
    Retry:   Never; the caller must fix the argument.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        super().__init__(message=message, context=ctx)
        self.argument = argument


class NotFoundError(ForumGuardError):
    """Raised when a requested resource does not exist (HTTP 404)."""

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(ForumGuardError):
    """
    Raised when the forum store cannot be read.

    What:    A query against the forum store failed (connection lost,
             missing table, driver error).
    HTTP:    500 Internal Server Error

    The services never catch this; it reaches the caller exactly as the
    repository raised it. The message returned to the client is generic,
    the original exception type is kept in `context` for the server log.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
