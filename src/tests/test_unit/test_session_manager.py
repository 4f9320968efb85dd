import pytest
from fastapi import Response
from pymongo.errors import DuplicateKeyError

from exceptions.security import (
    InvalidCredentialsError,
    InvalidTokenError,
    RefreshTokenMissingError,
    UserAlreadyExistsError
)
from security.passwords import build_password_context
from security.sessions import SessionManager, SessionTokens
from tests.doubles.fakes.database import FakeDatabase


@pytest.fixture
def users(fake_db: FakeDatabase):
    return fake_db["users"]


@pytest.fixture
def session_manager(jwt_manager, users) -> SessionManager:
    return SessionManager(
        jwt_manager=jwt_manager,
        users=users,
        password_context=build_password_context(4),
        cookie_secure=True
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_signup_stores_hash_and_issues_tokens(
    session_manager, users, jwt_manager
):
    tokens = await session_manager.signup("alice", "wonderland")

    stored = await users.find_one({"username": "alice"})
    assert stored["password"] != "wonderland"
    assert stored["password"].startswith("$2b$")
    assert jwt_manager.decode_access_token(tokens.access_token)["username"] == "alice"
    assert jwt_manager.decode_refresh_token(tokens.refresh_token)["username"] == "alice"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_signup_existing_username_conflicts(session_manager, users):
    await session_manager.signup("alice", "wonderland")

    with pytest.raises(UserAlreadyExistsError):
        await session_manager.signup("alice", "another")
    assert len(users.documents) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_signup_duplicate_key_is_a_conflict(session_manager, users):
    async def racing_insert(document):
        raise DuplicateKeyError("E11000 duplicate key error")

    users.insert_one = racing_insert

    with pytest.raises(UserAlreadyExistsError):
        await session_manager.signup("alice", "wonderland")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_login_after_signup(session_manager, jwt_manager):
    await session_manager.signup("bob", "builder")

    tokens = await session_manager.login("bob", "builder")

    assert isinstance(tokens, SessionTokens)
    assert jwt_manager.decode_access_token(tokens.access_token)["username"] == "bob"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_login_wrong_password(session_manager):
    await session_manager.signup("bob", "builder")

    with pytest.raises(InvalidCredentialsError):
        await session_manager.login("bob", "breaker")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_login_unknown_user(session_manager):
    with pytest.raises(InvalidCredentialsError):
        await session_manager.login("nobody", "builder")


@pytest.mark.unit
def test_refresh_issues_new_access_token(session_manager, jwt_manager):
    refresh_token = jwt_manager.create_refresh_token("carol")

    access_token = session_manager.refresh(refresh_token)

    assert jwt_manager.decode_access_token(access_token)["username"] == "carol"


@pytest.mark.unit
@pytest.mark.parametrize("refresh_token", [None, ""])
def test_refresh_without_token(session_manager, refresh_token):
    with pytest.raises(RefreshTokenMissingError):
        session_manager.refresh(refresh_token)


@pytest.mark.unit
def test_refresh_rejects_access_token(session_manager, jwt_manager):
    access_token = jwt_manager.create_access_token("carol")

    with pytest.raises(InvalidTokenError):
        session_manager.refresh(access_token)


@pytest.mark.unit
def test_session_cookies_flags(session_manager):
    response = Response()
    session_manager.set_session_cookies(
        response, SessionTokens(access_token="a", refresh_token="r")
    )

    cookies = response.headers.getlist("set-cookie")
    assert len(cookies) == 2
    assert cookies[0].startswith("token=a;")
    assert cookies[1].startswith("refreshToken=r;")
    for cookie in cookies:
        assert "HttpOnly" in cookie
        assert "Secure" in cookie
        assert "Path=/" in cookie


@pytest.mark.unit
def test_logout_clears_both_cookies(session_manager):
    response = Response()
    session_manager.logout(response)

    cookies = response.headers.getlist("set-cookie")
    assert len(cookies) == 2
    assert cookies[0].startswith('token="";')
    assert cookies[1].startswith('refreshToken="";')
    for cookie in cookies:
        assert "Max-Age=0" in cookie
