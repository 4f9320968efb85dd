from datetime import timedelta, datetime, timezone
from typing import Optional

from jose import jwt, ExpiredSignatureError, JWTError

from exceptions.security import TokenExpiredError, InvalidTokenError
from security.interfaces import JWTManagerInterface


class JWTManager(JWTManagerInterface):
    """JWT token manager for handling access and refresh tokens.

    Access and refresh tokens are signed with different secrets, so a
    refresh token can never be used where an access token is expected and
    the other way round. Tokens are stateless: their validity depends only on
    the signature and the ``exp`` claim.
    """

    def __init__(
        self,
        access_secret_key: str,
        refresh_secret_key: str,
        access_expires_delta: int,
        refresh_expires_delta: int,
        algorithm: str
    ) -> None:
        """Initialize the JWT manager with configuration.

        Args:
            access_secret_key (str): Secret key for signing access tokens.
            refresh_secret_key (str): Secret key for signing refresh tokens.
            access_expires_delta (int): Access token expiration time in minutes.
            refresh_expires_delta (int): Refresh token expiration time in minutes.
            algorithm (str): JWT signing algorithm (e.g., 'HS256').
        """
        self.access_expires_delta: timedelta = timedelta(
            minutes=access_expires_delta
        )
        self.refresh_expires_delta: timedelta = timedelta(
            minutes=refresh_expires_delta
        )
        self._access_secret_key = access_secret_key
        self._refresh_secret_key = refresh_secret_key
        self._algorithm = algorithm

    def _create_token(
        self, username: str, secret_key: str, expires_delta: timedelta
    ) -> str:
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode = {"username": username, "exp": expire}

        return jwt.encode(to_encode, key=secret_key, algorithm=self._algorithm)

    def create_access_token(
        self,
        username: str,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        return self._create_token(
            username=username,
            secret_key=self._access_secret_key,
            expires_delta=expires_delta if expires_delta else self.access_expires_delta
        )

    def create_refresh_token(
        self,
        username: str,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        return self._create_token(
            username=username,
            secret_key=self._refresh_secret_key,
            expires_delta=expires_delta if expires_delta else self.refresh_expires_delta
        )

    def decode(self, token: str, secret_key: str) -> dict:
        """Decode a token and check its signature and expiry.

        Args:
            token (str): The encoded token.
            secret_key (str): Secret the token is expected to be signed with.

        Returns:
            dict: The token claims.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid or malformed.
        """
        try:
            claims = jwt.decode(
                token,
                secret_key,
                algorithms=[self._algorithm]
            )
        except ExpiredSignatureError:
            raise TokenExpiredError
        except JWTError:
            raise InvalidTokenError

        if not isinstance(claims.get("username"), str):
            raise InvalidTokenError("Token has no username claim.")
        return claims

    def decode_access_token(self, token: str) -> dict:
        return self.decode(token, self._access_secret_key)

    def decode_refresh_token(self, token: str) -> dict:
        return self.decode(token, self._refresh_secret_key)
