from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class JWTManagerInterface(ABC):
    """Abstract interface for JWT token management.

    This interface defines the contract for issuing and decoding the access
    and refresh tokens that carry a ``username`` claim.
    """

    @abstractmethod
    def create_access_token(
        self, username: str, expires_delta: Optional[timedelta] = None
    ) -> str:
        """Create a short-lived access token for ``username``.

        Args:
            username (str): Value of the ``username`` claim.
            expires_delta (Optional[timedelta]): Custom expiration time.

        Returns:
            str: Encoded access token.
        """
        pass

    @abstractmethod
    def create_refresh_token(
        self, username: str, expires_delta: Optional[timedelta] = None
    ) -> str:
        """Create a long-lived refresh token for ``username``.

        Args:
            username (str): Value of the ``username`` claim.
            expires_delta (Optional[timedelta]): Custom expiration time.

        Returns:
            str: Encoded refresh token.
        """
        pass

    @abstractmethod
    def decode(self, token: str, secret_key: str) -> dict:
        """Decode a token signed with ``secret_key``.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or malformed.
        """
        pass

    @abstractmethod
    def decode_access_token(self, token: str) -> dict:
        """Decode and validate an access token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or malformed.
        """
        pass

    @abstractmethod
    def decode_refresh_token(self, token: str) -> dict:
        """Decode and validate a refresh token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or malformed.
        """
        pass
