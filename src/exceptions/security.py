class BaseSecurityError(Exception):
    """Base exception class for security-related errors.

    This is the parent class for all security exceptions in the application.
    It provides a common interface for security error handling.
    """

    def __init__(self, message=None) -> None:
        """Initialize the base security error.

        Args:
            message (str, optional): Custom error message. Defaults to generic message.
        """
        if message is None:
            message = "A security error occurred."
        super().__init__(message)


class TokenExpiredError(BaseSecurityError):
    """Exception raised when a JWT token has expired."""

    def __init__(self, message="Token has expired.") -> None:
        super().__init__(message)


class InvalidTokenError(BaseSecurityError):
    """Exception raised when a JWT token is invalid or malformed.

    This covers a bad signature, a token signed with another secret and
    anything that cannot be decoded at all.
    """

    def __init__(self, message="Invalid token.") -> None:
        super().__init__(message)


class InvalidCredentialsError(BaseSecurityError):
    """Exception raised when a username/password pair does not match a user.

    Raised for both an unknown username and a wrong password so callers
    cannot tell the two apart.
    """

    def __init__(self, message="Invalid credentials") -> None:
        super().__init__(message)


class UserAlreadyExistsError(BaseSecurityError):
    """Exception raised when signing up with a username that is taken."""

    def __init__(self, message="User already exists") -> None:
        super().__init__(message)


class RefreshTokenMissingError(BaseSecurityError):
    """Exception raised when a request carries no refresh token cookie."""

    def __init__(self, message="No refresh token provided") -> None:
        super().__init__(message)
