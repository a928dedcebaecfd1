"""
Error taxonomy for the service layer.

Read-side "not found" is never an exception: lookups return a success
envelope with ``data=None``. Everything here is raised for invalid input,
a missing mutation target, or a broken business rule.
"""

from typing import Any, Optional


class ApiError(Exception):
    """Base class for every error the service layer raises."""

    status: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "success": False,
            "message": self.message,
            "status": self.status,
            "code": self.code,
        }
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidRequestError(ApiError):
    """Missing or malformed input."""

    status = 400
    code = "validation_error"


class ConflictError(InvalidRequestError):
    """A unique key (e.g. customer phone) is already taken."""

    status = 409
    code = "conflict"


class AuthenticationError(ApiError):
    """Login rejected."""

    status = 401
    code = "unauthenticated"


class NotFoundError(ApiError):
    """The entity a mutation targets does not exist."""

    status = 404
    code = "not_found"


class BusinessRuleError(ApiError):
    """The request is well-formed but the current state forbids it."""

    status = 422
    code = "business_rule_violation"
