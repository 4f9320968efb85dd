from fastapi import APIRouter, status, Depends, Response
from pymongo.errors import PyMongoError

from config.dependencies import get_session_manager, get_refresh_token
from config.logger import logger
from exceptions.api import (
    AuthError,
    ConflictError,
    ForbiddenError,
    InternalError
)
from exceptions.security import (
    BaseSecurityError,
    InvalidCredentialsError,
    UserAlreadyExistsError
)
from schemas.accounts import (
    SignupRequestSchema,
    LoginRequestSchema,
    MessageResponseSchema,
    LoginResponseSchema,
    TokenRefreshResponseSchema,
    LogoutResponseSchema
)
from security.sessions import SessionManager

router = APIRouter()


@router.post(
    "/signup",
    response_model=MessageResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
    description="Create a user with a bcrypt-hashed password and open a "
                "session by setting the `token` and `refreshToken` cookies.",
    responses={
        200: {
            "description": "User registered, session cookies set",
            "content": {
                "application/json": {
                    "example": {"message": "User registered successfully"}
                }
            }
        },
        400: {
            "description": "Username already taken",
            "content": {
                "application/json": {
                    "example": {"error": "User already exists"}
                }
            }
        },
        500: {
            "description": "Database failure",
            "content": {
                "application/json": {
                    "example": {
                        "status": 500,
                        "message": "Internal Server Error",
                        "error": "An unexpected database error occurred."
                    }
                }
            }
        }
    }
)
async def signup(
    data: SignupRequestSchema,
    response: Response,
    session_manager: SessionManager = Depends(get_session_manager)
) -> MessageResponseSchema:
    """Register a new user and log them in.

    Args:
        data: Username and password.
        response: Response the session cookies are written to.
        session_manager: Session manager service.

    Returns:
        MessageResponseSchema: Confirmation message.
    """
    try:
        tokens = await session_manager.signup(data.username, data.password)
    except UserAlreadyExistsError as e:
        raise ConflictError(str(e))
    except PyMongoError:
        logger.exception("Database error during signup")
        raise InternalError

    session_manager.set_session_cookies(response, tokens)
    return MessageResponseSchema(message="User registered successfully")


@router.post(
    "/login",
    response_model=LoginResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Check the credentials and open a session. The access token "
                "is returned in the body as well as in the `token` cookie.",
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {"error": "Invalid credentials"}
                }
            }
        }
    }
)
async def login(
    data: LoginRequestSchema,
    response: Response,
    session_manager: SessionManager = Depends(get_session_manager)
) -> LoginResponseSchema:
    """Authenticate a user.

    Args:
        data: Username and password.
        response: Response the session cookies are written to.
        session_manager: Session manager service.

    Returns:
        LoginResponseSchema: Confirmation message and the access token.
    """
    try:
        tokens = await session_manager.login(data.username, data.password)
    except InvalidCredentialsError as e:
        raise AuthError(str(e))
    except PyMongoError:
        logger.exception("Database error during login")
        raise InternalError

    session_manager.set_session_cookies(response, tokens)
    return LoginResponseSchema(message="Authenticated", jwt=tokens.access_token)


@router.get(
    "/refresh",
    response_model=TokenRefreshResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Refresh access token",
    description="Mint a new access token from the `refreshToken` cookie. "
                "The refresh token itself is not rotated.",
    responses={
        401: {
            "description": "No cookies, or no refresh token cookie",
            "content": {
                "application/json": {
                    "examples": {
                        "no_cookies": {
                            "summary": "No cookies",
                            "value": {"error": "No cookies provided"}
                        },
                        "no_refresh_token": {
                            "summary": "No refresh token",
                            "value": {"error": "No refresh token provided"}
                        }
                    }
                }
            }
        },
        403: {
            "description": "Invalid or expired refresh token",
            "content": {
                "application/json": {
                    "example": {"error": "Invalid refresh token"}
                }
            }
        }
    }
)
async def refresh_access_token(
    response: Response,
    refresh_token: str = Depends(get_refresh_token),
    session_manager: SessionManager = Depends(get_session_manager)
) -> TokenRefreshResponseSchema:
    """Obtain a new access token using the refresh token cookie.

    Args:
        response: Response the new access cookie is written to.
        refresh_token: Refresh token read from the cookies.
        session_manager: Session manager service.

    Returns:
        TokenRefreshResponseSchema: The new access token.
    """
    try:
        access_token = session_manager.refresh(refresh_token)
    except BaseSecurityError as e:
        logger.info(f"Refresh rejected: {e}")
        raise ForbiddenError("Invalid refresh token")

    session_manager.set_access_cookie(response, access_token)
    return TokenRefreshResponseSchema(token=access_token)


@router.post(
    "/logout",
    response_model=LogoutResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="User logout",
    description="Clear both session cookies. Always succeeds, whether or not "
                "the client was logged in."
)
async def logout(
    response: Response,
    session_manager: SessionManager = Depends(get_session_manager)
) -> LogoutResponseSchema:
    """Log the client out by expiring its session cookies.

    Args:
        response: Response the cleared cookies are written to.
        session_manager: Session manager service.

    Returns:
        LogoutResponseSchema: Confirmation message.
    """
    session_manager.logout(response)
    return LogoutResponseSchema(message="Logged out")
