from typing import Any

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors rendered as JSON responses by the API.

    Subclasses fix the status code and the default message, and decide the
    body shape through ``to_dict``. Resource routes answer with
    ``{"status", "message"}``, authentication routes with ``{"error"}``.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An error occurred."

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None
    ) -> None:
        self.message = message or self.default_message
        super().__init__(
            status_code=status_code or type(self).status_code,
            detail=self.message
        )

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status_code, "message": self.message}


class ValidationError(ApiError):
    """Malformed identifier or request data."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid ID"


class NotFoundError(ApiError):
    """The requested document does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class AuthError(ApiError):
    """Bad credentials or a missing refresh token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ForbiddenError(AuthError):
    """A refresh token was presented but is invalid or expired."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid refresh token"


class ConflictError(ApiError):
    """The username is already registered."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class InternalError(ApiError):
    """Any unexpected failure, including database connectivity errors.

    The underlying exception is logged by the raiser; only ``error`` (a
    sanitized description) reaches the client.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(
        self,
        error: str = "An unexpected database error occurred.",
        message: str | None = None
    ) -> None:
        self.error = error
        super().__init__(message=message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status_code,
            "message": self.message,
            "error": self.error,
        }
