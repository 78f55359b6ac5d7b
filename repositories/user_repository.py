"""
User Repository - Data access layer for user accounts
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session, defer
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError

logger = logging.getLogger("freshsave.repositories.users")


class UserRepository(BaseRepository[User]):
    """Repository for user data access. All lookups are exact, case-sensitive."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID without loading the password hash"""
        return (
            self.db.query(User)
            .options(defer(User.hashed_password, raiseload=True))
            .filter(User.id == user_id)
            .first()
        )

    def get_by_username_with_credentials(self, username: str) -> Optional[User]:
        """
        Get user by username including the password hash.

        Only the authentication service should call this.
        """
        return (
            self.db.query(User)
            .filter(User.username == username)
            .populate_existing()
            .first()
        )

    def username_exists(self, username: str) -> bool:
        return (
            self.db.query(User.id).filter(User.username == username).first()
            is not None
        )

    def email_exists(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def create_user(self, username: str, email: str, hashed_password: str) -> User:
        """Create a new user; duplicate username/email raises ConflictError"""
        user = User(username=username, email=email, hashed_password=hashed_password)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            logger.info("user_create_conflict username=%s", username)
            if self.username_exists(username):
                raise ConflictError("Username already exists")
            raise ConflictError("Email already exists")
