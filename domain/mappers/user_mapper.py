"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.auth_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert a User ORM model to the sanitized UserResponse DTO.

        Only identity fields are copied; the password hash never leaves
        the service layer.

        Args:
            user: User ORM instance

        Returns:
            UserResponse DTO with id, username and email
        """
        return UserResponse(id=user.id, username=user.username, email=user.email)
