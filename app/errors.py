"""
Error kinds raised by the User API layers.

Two failure kinds exist and both surface as HTTP 400:

- ``MalformedRequestError`` -- the request body could not be read as a User.
- ``ValidationError`` -- the body parsed, but the User breaks a domain rule.
"""


class UserApiError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedRequestError(UserApiError):
    """Raised when a request body is not a well-formed User payload."""

    def __init__(self, message: str = "invalid request") -> None:
        super().__init__(message)


class ValidationError(UserApiError):
    """Raised when a User fails domain validation."""
