from functools import lru_cache

from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 10


@lru_cache
def build_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """Build a bcrypt password context with a fixed cost factor.

    Args:
        rounds (int): The bcrypt cost factor (log2 of the iteration count).

    Returns:
        CryptContext: Context used to hash and verify passwords.
    """
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds
    )


pwd_context = build_password_context()


def hash_password(
    raw_password: str,
    context: CryptContext = pwd_context
) -> str:
    """Hash a plain text password using bcrypt.

    Args:
        raw_password (str): The plain text password to hash.
        context (CryptContext): Context to hash with.

    Returns:
        str: The hashed password.
    """
    return context.hash(raw_password)


def verify_password(
    plain_password: str,
    hashed_password: str,
    context: CryptContext = pwd_context
) -> bool:
    """Verify a plain text password against a hashed password.

    A stored value that is not a bcrypt hash never verifies.

    Args:
        plain_password (str): The plain text password to verify.
        hashed_password (str): The hashed password to compare against.
        context (CryptContext): Context to verify with.

    Returns:
        bool: True if the password matches, False otherwise.
    """
    try:
        return context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False
