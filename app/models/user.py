"""
User database model.

Users are created on first authenticated request from the identity the
OAuth provider vouched for; there are no local passwords.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """
    User model.

    Stores identity and public profile settings.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=255)
    image: Optional[str] = Field(default=None)
    username: Optional[str] = Field(default=None, unique=True, index=True, max_length=64)
    is_public: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True))
