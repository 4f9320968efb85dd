def validate_username(username: str) -> str:
    """Normalize and validate a username.

    Surrounding whitespace is stripped; the result must not be empty.

    Args:
        username (str): The username to validate.

    Returns:
        str: The stripped username.

    Raises:
        ValueError: If the username is blank.
    """
    username = username.strip()
    if not username:
        raise ValueError("Username must not be empty.")
    return username


def validate_password_present(password: str) -> str:
    """Reject an empty password.

    Args:
        password (str): The password to validate.

    Returns:
        str: The password, unchanged.

    Raises:
        ValueError: If the password is empty.
    """
    if not password:
        raise ValueError("Password must not be empty.")
    return password
