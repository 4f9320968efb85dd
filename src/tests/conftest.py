import os
from typing import AsyncGenerator, Any

os.environ["ENVIRONMENT"] = "testing"

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from config.dependencies import get_database
from config.settings import get_settings, BaseAppSettings
from main import create_app
from security.interfaces import JWTManagerInterface
from security.manager import JWTManager
from security.passwords import build_password_context, hash_password
from tests.doubles.fakes.database import FakeDatabase


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """
    Session-scoped fixture to create and return a FastAPI app instance for testing.
    The lifespan (logging setup, index creation) is not run by ASGITransport.
    """
    get_settings.cache_clear()
    return create_app()


@pytest.fixture(scope="session")
def settings() -> BaseAppSettings:
    """Provide the testing settings."""
    return get_settings()


@pytest.fixture(scope="function")
def fake_db() -> FakeDatabase:
    """Provide an empty in-memory database for each test."""
    return FakeDatabase()


@pytest.fixture(scope="function")
def jwt_manager(settings: BaseAppSettings) -> JWTManagerInterface:
    """
    Function-scoped fixture to provide a JWT manager for creating and verifying tokens.
    Uses settings from BaseAppSettings.
    """
    return JWTManager(
        access_secret_key=settings.SECRET_KEY_ACCESS,
        refresh_secret_key=settings.SECRET_KEY_REFRESH,
        access_expires_delta=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_expires_delta=settings.REFRESH_TOKEN_EXPIRE_MINUTES,
        algorithm=settings.JWT_SIGNING_ALGORITHM
    )


@pytest_asyncio.fixture(scope="function")
async def client(
    app: FastAPI,
    fake_db: FakeDatabase
) -> AsyncGenerator[AsyncClient, Any]:
    """
    Provide an asynchronous HTTP client for testing.
    Overrides the database dependency with the in-memory fake.
    """
    app.dependency_overrides[get_database] = lambda: fake_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as async_client:
        yield async_client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def registered_user(
    fake_db: FakeDatabase,
    settings: BaseAppSettings
) -> dict[str, Any]:
    """Store a user with a hashed password directly in the users collection."""
    username = "john.doe"
    password = "SecurePassword123!"
    await fake_db["users"].insert_one({
        "username": username,
        "password": hash_password(
            password, build_password_context(settings.BCRYPT_ROUNDS)
        )
    })
    return {"username": username, "password": password}


@pytest_asyncio.fixture(scope="function")
async def seed_movies(fake_db: FakeDatabase) -> list[dict[str, Any]]:
    """Insert a dozen movies, more than the listing limit."""
    movies = [
        {"_id": ObjectId(), "title": f"Movie {index}", "year": 1990 + index}
        for index in range(12)
    ]
    for movie in movies:
        await fake_db["movies"].insert_one(dict(movie))
    return movies


@pytest_asyncio.fixture(scope="function")
async def seed_theaters(fake_db: FakeDatabase) -> list[dict[str, Any]]:
    theaters = [
        {
            "_id": ObjectId(),
            "theaterId": 1000 + index,
            "location": {"address": {"city": "Bloomington", "state": "MN"}}
        }
        for index in range(3)
    ]
    for theater in theaters:
        await fake_db["theaters"].insert_one(dict(theater))
    return theaters


@pytest_asyncio.fixture(scope="function")
async def seed_comments(
    fake_db: FakeDatabase,
    seed_movies: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Insert two comments on the first movie and one on the second."""
    first_movie_id = seed_movies[0]["_id"]
    second_movie_id = seed_movies[1]["_id"]
    comments = [
        {"_id": ObjectId(), "movie_id": first_movie_id, "text": "Great"},
        {"_id": ObjectId(), "movie_id": first_movie_id, "text": "Too long"},
        {"_id": ObjectId(), "movie_id": second_movie_id, "text": "Classic"},
    ]
    for comment in comments:
        await fake_db["comments"].insert_one(dict(comment))
    return comments
