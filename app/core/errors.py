# app/core/errors.py
"""
Error taxonomy shared by the engines and the HTTP layer.

Engines raise these, app.main renders them into the response envelope
with the status code each class carries.
"""
import uuid
from typing import Optional


class ApiError(Exception):
    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidArgument(ApiError):
    status_code = 400
    default_message = "Invalid argument"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflict"


class Internal(ApiError):
    status_code = 500
    default_message = "Internal server error"


def parse_id(value, label: str = "id") -> uuid.UUID:
    """Parses an identifier, raising InvalidArgument for anything that is not a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid {label} format")
