from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from config.settings import BaseAppSettings, get_settings
from database import USERS_COLLECTION, get_mongo_database
from exceptions.api import AuthError
from security.interfaces import JWTManagerInterface
from security.manager import JWTManager
from security.passwords import build_password_context
from security.sessions import REFRESH_TOKEN_COOKIE, SessionManager


def get_jwt_manager(
    settings: BaseAppSettings = Depends(get_settings)
) -> JWTManagerInterface:
    """Get JWT manager instance with application settings.

    Creates and returns a JWT manager configured with the application's
    secret keys, token expiration times, and signing algorithm.

    Args:
        settings (BaseAppSettings): Application settings containing JWT configuration.

    Returns:
        JWTManagerInterface: Configured JWT manager instance.
    """
    return JWTManager(
        access_secret_key=settings.SECRET_KEY_ACCESS,
        refresh_secret_key=settings.SECRET_KEY_REFRESH,
        access_expires_delta=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_expires_delta=settings.REFRESH_TOKEN_EXPIRE_MINUTES,
        algorithm=settings.JWT_SIGNING_ALGORITHM
    )


def get_database(
    settings: BaseAppSettings = Depends(get_settings)
) -> AsyncDatabase:
    """Get the application database.

    Args:
        settings (BaseAppSettings): Application settings containing the
            MongoDB connection string and database name.

    Returns:
        AsyncDatabase: Handle on the configured database.
    """
    return get_mongo_database(settings.MONGODB_URI, settings.MONGODB_DB)


def get_session_manager(
    settings: BaseAppSettings = Depends(get_settings),
    jwt_manager: JWTManagerInterface = Depends(get_jwt_manager),
    db: AsyncDatabase = Depends(get_database)
) -> SessionManager:
    """Get a session manager bound to the users collection.

    Args:
        settings (BaseAppSettings): Application settings (bcrypt cost, cookie flags).
        jwt_manager (JWTManagerInterface): Token issuer.
        db (AsyncDatabase): Application database.

    Returns:
        SessionManager: Configured session manager.
    """
    return SessionManager(
        jwt_manager=jwt_manager,
        users=db[USERS_COLLECTION],
        password_context=build_password_context(settings.BCRYPT_ROUNDS),
        cookie_secure=settings.COOKIE_SECURE
    )


async def get_refresh_token(request: Request) -> str:
    """Extract the refresh token from the request cookies.

    Args:
        request (Request): The incoming request.

    Returns:
        str: The raw refresh token.

    Raises:
        AuthError: If the request has no cookies at all, or no
            ``refreshToken`` cookie (401 Unauthorized).
    """
    if not request.headers.get("cookie"):
        raise AuthError("No cookies provided")

    refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not refresh_token:
        raise AuthError("No refresh token provided")
    return refresh_token
