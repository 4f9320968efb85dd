import pytest
from pydantic import ValidationError

from config.settings import (
    DEFAULT_ACCESS_SECRET,
    DEFAULT_REFRESH_SECRET,
    Settings,
    TestingSettings,
    get_settings
)


@pytest.mark.unit
def test_testing_environment_selects_testing_settings(settings):
    assert isinstance(settings, TestingSettings)
    assert settings.COOKIE_SECURE is False
    assert get_settings() is settings


@pytest.mark.unit
def test_token_lifetimes_default_to_fifteen_minutes_and_seven_days():
    settings = Settings()
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.REFRESH_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60
    assert settings.MOVIES_LIST_LIMIT == 10
    assert settings.BCRYPT_ROUNDS == 10


@pytest.mark.unit
def test_default_secrets_are_flagged():
    settings = Settings(
        SECRET_KEY_ACCESS=DEFAULT_ACCESS_SECRET,
        SECRET_KEY_REFRESH="configured"
    )
    assert settings.uses_default_secrets

    settings = Settings(
        SECRET_KEY_ACCESS="configured",
        SECRET_KEY_REFRESH=DEFAULT_REFRESH_SECRET
    )
    assert settings.uses_default_secrets

    settings = Settings(
        SECRET_KEY_ACCESS="configured-access",
        SECRET_KEY_REFRESH="configured-refresh"
    )
    assert not settings.uses_default_secrets


@pytest.mark.unit
def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.MONGODB_DB = "other"
