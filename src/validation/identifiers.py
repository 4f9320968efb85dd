from bson import ObjectId

from database.validators.identifiers import parse_object_id
from exceptions.api import ValidationError


def validate_object_id(value: str, message: str = "Invalid ID") -> ObjectId:
    """Parse a path identifier or reject the request.

    Runs before any database access, so a malformed identifier never
    reaches MongoDB.

    Args:
        value (str): The identifier from the request path.
        message (str): Message of the 400 response on failure.

    Returns:
        ObjectId: The parsed identifier.

    Raises:
        ValidationError: If the value is not a 24-character hex string.
    """
    try:
        return parse_object_id(value)
    except ValueError:
        raise ValidationError(message)


def validate_object_ids(
    *values: str,
    message: str = "Invalid ID"
) -> tuple[ObjectId, ...]:
    """Validate several identifiers together with one shared message."""
    return tuple(validate_object_id(value, message) for value in values)
