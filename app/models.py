"""
Domain model for the User API.

``User`` is a plain record. It has no persistence mapping; storage is
owned by :class:`app.repository.UserRepository`.
"""

from dataclasses import dataclass
from typing import Any

from app.errors import MalformedRequestError


@dataclass
class User:
    """
    User record.

    Attributes:
        id: Identifier assigned by the repository on creation.
        name: Display name, unconstrained.
        email: Email address, must be non-empty to be accepted.
    """

    id: int | None = None
    name: str = ""
    email: str = ""

    @classmethod
    def from_payload(cls, data: Any) -> "User":
        """
        Build a User from a decoded JSON request body.

        Missing ``name`` or ``email`` default to empty strings; whether
        they are acceptable is decided by the service layer. A client
        ``id`` must be an integer if present, but its value is ignored.

        Args:
            data: Decoded JSON value (expected to be an object).

        Returns:
            A new, unsaved User.

        Raises:
            MalformedRequestError: If the body is not an object or a
                field has the wrong type.
        """
        if not isinstance(data, dict):
            raise MalformedRequestError()

        client_id = data.get("id")
        if client_id is not None and (
            not isinstance(client_id, int) or isinstance(client_id, bool)
        ):
            raise MalformedRequestError()

        fields = {}
        for field in ("name", "email"):
            value = data.get(field, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise MalformedRequestError()
            fields[field] = value

        return cls(name=fields["name"], email=fields["email"])

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the user to a dictionary representation.

        Returns:
            Dictionary containing all user fields.
        """
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }

    def __repr__(self) -> str:
        """Return string representation of the user."""
        return f"<User {self.id}: {self.name}>"
