"""
User service layer.

Sits between the HTTP controller and the repository: validates incoming
users and delegates storage.
"""

import logging

from app.errors import ValidationError
from app.models import User
from app.repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Validation and orchestration for User operations."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def get_all_users(self) -> list[User]:
        return self.repository.get_all()

    def create_user(self, user: User) -> User:
        """
        Validate and store a new user.

        Args:
            user: Unsaved user built from the request body.

        Returns:
            The stored user with its assigned ID.

        Raises:
            ValidationError: If the email is empty.
        """
        if user.email == "":
            logger.warning("Rejected user %r: email is required", user.name)
            raise ValidationError("email is required")

        return self.repository.create(user)
