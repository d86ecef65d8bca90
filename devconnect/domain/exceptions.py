"""
Error taxonomy for DevConnect.

Use cases and repositories raise these; the API layer maps each class to an
HTTP status in one place. Every error carries a user-facing message that is
safe to return to clients.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class DevConnectError(Exception):
    """Base exception for all DevConnect errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(DevConnectError):
    """Raised when a field violates a length or format rule."""
    pass


class AuthenticationError(DevConnectError):
    """Raised when the caller's identity is missing or cannot be verified."""
    pass


class AuthorizationError(DevConnectError):
    """Raised when an authenticated user tries to mutate a record they do not own."""

    def __init__(self, message: str = "Not authorized", **kwargs):
        super().__init__(message, user_message="Not authorized", **kwargs)


class NotFoundError(DevConnectError):
    """Raised when an id does not resolve, including malformed ids."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        super().__init__(
            f"{resource} not found",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class StoreError(DevConnectError):
    """Raised for any persistence failure that is not a client error."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, user_message="Server error", **kwargs)
        self.operation = operation


def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Internal details of unexpected errors are never exposed.
    """
    if isinstance(exc, DevConnectError) and exc.user_message:
        return exc.user_message
    return "Server error"
