import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ACCESS_SECRET = "super-secret-key"
DEFAULT_REFRESH_SECRET = "refresh-secret"


class BaseAppSettings(BaseSettings):
    """Base application settings configuration.

    Holds the JWT secrets and lifetimes, the MongoDB connection details and
    the cookie and logging options. Values are read from the environment
    once; the instance is frozen afterwards.
    """
    model_config = SettingsConfigDict(frozen=True)

    SECRET_KEY_ACCESS: str = os.getenv("JWT_SECRET") or DEFAULT_ACCESS_SECRET
    SECRET_KEY_REFRESH: str = (
        os.getenv("REFRESH_SECRET") or DEFAULT_REFRESH_SECRET
    )
    JWT_SIGNING_ALGORITHM: str = os.getenv("JWT_SIGNING_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 15)
    )
    REFRESH_TOKEN_EXPIRE_MINUTES: int = int(
        os.getenv("REFRESH_TOKEN_EXPIRE_MINUTES", 7 * 24 * 60)
    )
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", 10))

    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB: str = os.getenv("MONGODB_DB", "sample_mflix")
    MOVIES_LIST_LIMIT: int = int(os.getenv("MOVIES_LIST_LIMIT", 10))

    COOKIE_SECURE: bool = os.getenv("COOKIE_SECURE", "True").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def uses_default_secrets(self) -> bool:
        """Whether either signing secret is still the hardcoded fallback.

        Returns:
            bool: True if the access or refresh secret was not configured.
        """
        return (
            self.SECRET_KEY_ACCESS == DEFAULT_ACCESS_SECRET
            or self.SECRET_KEY_REFRESH == DEFAULT_REFRESH_SECRET
        )


class Settings(BaseAppSettings):
    """Production settings configuration."""
    pass


class TestingSettings(BaseAppSettings):
    """Testing settings configuration.

    Cookies are sent without the ``Secure`` flag so that a plain-HTTP test
    client keeps them.
    """
    COOKIE_SECURE: bool = False
    MONGODB_DB: str = "sample_mflix_test"
    BCRYPT_ROUNDS: int = 4


@lru_cache
def get_settings() -> BaseAppSettings:
    """Return the settings instance based on the ENVIRONMENT variable.

    If the ENVIRONMENT environment variable is set to 'testing', this function
    returns an instance of TestingSettings. For any other value (including when
    unset), it returns an instance of Settings. The result is cached, so the
    environment is read once per process.

    Returns:
        BaseAppSettings: The settings instance appropriate for the current environment.
    """
    environment = os.getenv("ENVIRONMENT", "developing")
    if environment == "testing":
        return TestingSettings()
    return Settings()
