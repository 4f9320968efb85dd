"""Cookie-based session lifecycle.

A session exists only as the pair of cookies held by the client: ``token``
(access token) and ``refreshToken`` (refresh token). The server keeps no
session record, so ``logout`` merely overwrites the cookies and a stolen
refresh token stays usable until it expires.
"""
from dataclasses import dataclass

from fastapi import Response
from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError

from config.logger import logger
from exceptions.security import (
    InvalidCredentialsError,
    RefreshTokenMissingError,
    UserAlreadyExistsError
)
from security.interfaces import JWTManagerInterface
from security.passwords import hash_password, verify_password, pwd_context

ACCESS_TOKEN_COOKIE = "token"
REFRESH_TOKEN_COOKIE = "refreshToken"


@dataclass(frozen=True)
class SessionTokens:
    access_token: str
    refresh_token: str


class SessionManager:
    """Signup, login, refresh and logout on top of the users collection.

    Password hashing and verification are CPU bound and run in the
    threadpool; the only other awaits are the users collection queries.
    """

    def __init__(
        self,
        jwt_manager: JWTManagerInterface,
        users: AsyncCollection,
        password_context: CryptContext = pwd_context,
        cookie_secure: bool = True
    ) -> None:
        self._jwt_manager = jwt_manager
        self._users = users
        self._password_context = password_context
        self._cookie_secure = cookie_secure

    def _issue_tokens(self, username: str) -> SessionTokens:
        return SessionTokens(
            access_token=self._jwt_manager.create_access_token(username),
            refresh_token=self._jwt_manager.create_refresh_token(username)
        )

    async def signup(self, username: str, password: str) -> SessionTokens:
        """Register a new user and open a session for it.

        Args:
            username (str): Requested username.
            password (str): Plain text password; only its bcrypt hash is stored.

        Returns:
            SessionTokens: Fresh access and refresh tokens.

        Raises:
            UserAlreadyExistsError: If the username is already registered,
                including by a concurrent signup caught by the unique index.
        """
        existing_user = await self._users.find_one({"username": username})
        if existing_user:
            raise UserAlreadyExistsError

        hashed_password = await run_in_threadpool(
            hash_password, password, self._password_context
        )
        try:
            await self._users.insert_one(
                {"username": username, "password": hashed_password}
            )
        except DuplicateKeyError:
            raise UserAlreadyExistsError

        logger.info(f"User '{username}' signed up")
        return self._issue_tokens(username)

    async def login(self, username: str, password: str) -> SessionTokens:
        """Check credentials and open a session.

        Args:
            username (str): The username.
            password (str): The plain text password.

        Returns:
            SessionTokens: Fresh access and refresh tokens.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password
                does not match.
        """
        user = await self._users.find_one({"username": username})
        if not user:
            logger.info(f"Login failed for unknown user '{username}'")
            raise InvalidCredentialsError

        is_valid = await run_in_threadpool(
            verify_password,
            password,
            user.get("password"),
            self._password_context
        )
        if not is_valid:
            logger.info(f"Login failed for user '{username}': bad password")
            raise InvalidCredentialsError

        return self._issue_tokens(username)

    def refresh(self, refresh_token: str | None) -> str:
        """Mint a new access token from a refresh token.

        The refresh token itself is not rotated.

        Args:
            refresh_token (str | None): Value of the refresh cookie.

        Returns:
            str: A new access token for the same username.

        Raises:
            RefreshTokenMissingError: If no refresh token was supplied.
            BaseSecurityError: If the token is invalid or expired.
        """
        if not refresh_token:
            raise RefreshTokenMissingError
        claims = self._jwt_manager.decode_refresh_token(refresh_token)
        return self._jwt_manager.create_access_token(claims["username"])

    def set_access_cookie(self, response: Response, access_token: str) -> None:
        response.set_cookie(
            ACCESS_TOKEN_COOKIE,
            access_token,
            httponly=True,
            secure=self._cookie_secure,
            path="/"
        )

    def set_session_cookies(
        self,
        response: Response,
        tokens: SessionTokens
    ) -> None:
        self.set_access_cookie(response, tokens.access_token)
        response.set_cookie(
            REFRESH_TOKEN_COOKIE,
            tokens.refresh_token,
            httponly=True,
            secure=self._cookie_secure,
            path="/"
        )

    def clear_session_cookies(self, response: Response) -> None:
        """Overwrite both session cookies with empty, already-expired values."""
        for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
            response.set_cookie(
                name,
                "",
                max_age=0,
                httponly=True,
                secure=self._cookie_secure,
                path="/"
            )

    def logout(self, response: Response) -> None:
        """End the session regardless of its current state."""
        self.clear_session_cookies(response)
