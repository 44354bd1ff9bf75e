"""Domain exceptions for lawdesk.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The
presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class LawdeskException(Exception):
    """Base exception for all lawdesk application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description (returned to clients).
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the client-facing error body: {"error": message} plus field when known."""
        body: dict[str, Any] = {"error": self.message}
        field = self.details.get("field")
        if field:
            body["field"] = field
        return body


class ValidationException(LawdeskException):
    """Raised when input validation fails (missing or malformed fields)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(LawdeskException):
    """Raised when no credentials are presented or sign-in credentials are wrong."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class InvalidTokenException(LawdeskException):
    """Raised when a bearer token is malformed, forged, or expired."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, "INVALID_TOKEN")


class ResourceNotFoundException(LawdeskException):
    """Raised when a resource is absent or owned by another firm.

    The two cases share one message so callers cannot probe other tenants.
    """

    def __init__(self, message: str, resource_type: str | None = None) -> None:
        details = {"resource_type": resource_type} if resource_type else {}
        super().__init__(message, "RESOURCE_NOT_FOUND", details)


class ConflictException(LawdeskException):
    """Raised when a unique value (e.g. email) is already taken.

    Reported as 400 with the field name, never as a server fault.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "CONFLICT", details)
