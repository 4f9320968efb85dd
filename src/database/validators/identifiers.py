import re

from bson import ObjectId

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_object_id(value: str) -> bool:
    """Check that ``value`` is a 24-character hexadecimal ObjectId string.

    Args:
        value (str): Candidate identifier taken from the request path.

    Returns:
        bool: True if the value can be used as a document ``_id``.
    """
    return isinstance(value, str) and bool(OBJECT_ID_PATTERN.fullmatch(value))


def parse_object_id(value: str) -> ObjectId:
    """Convert a validated identifier string to an ObjectId.

    Args:
        value (str): A 24-character hexadecimal string.

    Returns:
        ObjectId: The parsed identifier.

    Raises:
        ValueError: If the value is not a valid identifier.
    """
    if not is_valid_object_id(value):
        raise ValueError(f"'{value}' is not a valid ObjectId.")
    return ObjectId(value)
