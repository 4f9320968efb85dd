from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from config.logger import bind_fastapi, logger, setup_logging
from config.settings import get_settings
from database import close_mongo_client, ensure_indexes, get_mongo_database
from exceptions.handlers import register_exception_handlers
from routers import auth, movies, theaters, comments

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and the database on startup, close it on shutdown."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    if settings.uses_default_secrets:
        logger.warning(
            "JWT_SECRET or REFRESH_SECRET is not set; tokens are signed "
            "with a hardcoded default secret"
        )

    await ensure_indexes(
        get_mongo_database(settings.MONGODB_URI, settings.MONGODB_DB)
    )
    logger.info(f"Connected to MongoDB database '{settings.MONGODB_DB}'")

    yield

    await close_mongo_client(settings.MONGODB_URI)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Movies API",
        description="""
        # Movies API Documentation

        ## Overview
        CRUD endpoints over the `sample_mflix` MongoDB dataset (movies,
        theaters and movie comments) and a cookie based authentication flow.

        ## Authentication
        Signup and login set two httpOnly cookies: `token` (access token,
        15 minutes) and `refreshToken` (7 days). `GET /api/auth/refresh`
        mints a new access token from the refresh cookie; logout clears both.

        ## Error Handling
        Resource routes answer `{"status", "message"}` on errors, auth routes
        `{"error"}`. The HTTP status code always matches.
        """,
        version=API_VERSION,
        lifespan=lifespan,
    )

    api_prefix = "/api"

    app.include_router(
        auth.router,
        prefix=f"{api_prefix}/auth",
        tags=["auth"]
    )
    app.include_router(
        movies.router,
        prefix=api_prefix,
        tags=["movies"]
    )
    app.include_router(
        comments.router,
        prefix=api_prefix,
        tags=["comments"]
    )
    app.include_router(
        theaters.router,
        prefix=api_prefix,
        tags=["theaters"]
    )

    register_exception_handlers(app)
    bind_fastapi(app)

    @app.get(
        "/health",
        tags=["system"],
        summary="Health Check",
        description="Check if the API is running",
        responses={
            200: {
                "description": "API is up",
                "content": {
                    "application/json": {
                        "example": {
                            "status": "healthy",
                            "version": API_VERSION,
                            "timestamp": "2025-01-01T00:00:00+00:00"
                        }
                    }
                }
            }
        }
    )
    async def health_check():
        return {
            "status": "healthy",
            "version": API_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
