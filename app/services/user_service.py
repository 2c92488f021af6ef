"""
User service.

Business logic for user provisioning and public profiles.
"""

import datetime
import logging
import re

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.security import TokenIdentity
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserUpdate

logger = logging.getLogger(__name__)

_USERNAME_INVALID_CHARS = re.compile(r"[^a-z0-9-]")


def username_from_email(email: str) -> str:
    """Derive a username from the local part of ``email``."""
    return _USERNAME_INVALID_CHARS.sub("-", email.split("@")[0].lower())


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def ensure_user(self, identity: TokenIdentity) -> User:
        """
        Return the user for ``identity``, creating it on first sign-in.

        Name and image are refreshed from the identity when it carries
        them; an existing username is never replaced.

        Args:
            identity: Validated token identity

        Returns:
            The stored user
        """
        user = self.repository.get_by_email(identity.email)

        if user is None:
            user = User(email=identity.email, name=identity.name, image=identity.image,
                        username=self._unique_username(username_from_email(identity.email)), )
            user = self.repository.create(user)
            logger.info("Created user %s (%s)", user.id, user.username)
            return user

        changed = False
        for field in ("name", "image"):
            value = getattr(identity, field)
            if value and getattr(user, field) != value:
                setattr(user, field, value)
                changed = True
        if not user.username:
            user.username = self._unique_username(username_from_email(identity.email))
            changed = True

        if changed:
            user.updated_at = datetime.datetime.now(datetime.timezone.utc)
            user = self.repository.update(user)
        return user

    def update_profile(self, user: User, data: UserUpdate) -> User:
        """
        Change username and/or visibility.

        Raises:
            HTTPException 409: If the username is taken by another user
        """
        if data.username is not None and data.username != user.username:
            if self.repository.exists_by_username(data.username):
                raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already taken")
            user.username = data.username

        if data.is_public is not None:
            user.is_public = data.is_public

        user.updated_at = datetime.datetime.now(datetime.timezone.utc)
        return self.repository.update(user)

    def get_public_user(self, username: str) -> User:
        """
        Get a user whose profile is public.

        Raises:
            HTTPException 404: If no such user exists or the profile is private
        """
        user = self.repository.get_by_username(username)
        if not user or not user.is_public:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
        return user

    def _unique_username(self, base: str) -> str:
        candidate = base
        suffix = 2
        while self.repository.exists_by_username(candidate):
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate
