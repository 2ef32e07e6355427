"""
SocialNet Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for every failure a request can hit.
How:   Each exception carries a message, an optional context dict and the
       HTTP status it maps to. Global handlers (registered in main.py) turn
       them into `{"message": ...}` JSON responses.
Who:   Raised by the security layer and services; caught by global handlers.

Exception Hierarchy:
    SocialNetError (base)
    ├── UnauthorizedError       → 401 (no credential presented)
    ├── InvalidTokenError       → 400 (credential presented but unverifiable)
    ├── InvalidCredentialError  → 400 (wrong password at login)
    ├── ValidationError         → 400 (client can fix the input)
    ├── NotFoundError           → 404
    ├── ForbiddenError          → 403 (authenticated but not permitted)
    └── InternalError           → 500 (hashing/storage failure)

Note on 401 vs 400:
    A missing `Authorization` header answers 401 while a present but invalid
    one answers 400. Clients depend on that split, so it is kept even though
    both are authentication failures.
"""

from typing import Any, Dict, Optional


class SocialNetError(Exception):
    """
    Base exception for all SocialNet application errors.

    Attributes:
        message:     User-facing error description (returned in the API response)
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status used by the global handler
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UnauthorizedError(SocialNetError):
    """
    Raised by the Access Guard when the request carries no credential.

    HTTP: 401 Unauthorized
    """

    status_code = 401

    def __init__(
        self,
        message: str = "Access denied",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidTokenError(SocialNetError):
    """
    Raised when a presented token cannot be verified.

    Bad signature, malformed structure, expiry and a missing identity claim
    all collapse into this one error so callers cannot tell them apart.

    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid token",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialError(SocialNetError):
    """Raised at login when the password does not match. HTTP: 400"""

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(SocialNetError):
    """
    Raised when client input fails validation.

    When:    Duplicate username/email, missing required fields, malformed ids.
    HTTP:    400 Bad Request
    """

    status_code = 400

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


class NotFoundError(SocialNetError):
    """
    Raised when a referenced user, group or email does not exist.

    HTTP: 404 Not Found

    SQLAlchemy returns None for missing rows; services convert that None
    into this exception so the HTTP mapping stays in one place.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource


class ForbiddenError(SocialNetError):
    """
    Raised when an authenticated caller is not allowed to perform a write.

    When:    A non-member posts into a group.
    HTTP:    403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "You are not a member of this group",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InternalError(SocialNetError):
    """
    Raised when hashing or storage fails unexpectedly.

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic. Details
    (driver errors, argon2 failures) are logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
