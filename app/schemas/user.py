"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.sick_day import CalendarResponse
from app.schemas.stats import UserStats

USERNAME_PATTERN = r"^[a-z0-9-]{3,30}$"


# Request schemas
class UserUpdate(BaseModel):
    """Schema for updating the public profile (all fields optional)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: Optional[str] = Field(None, pattern=USERNAME_PATTERN,
                                    description="3-30 lowercase letters, digits or dashes")
    is_public: Optional[bool] = None


# Response schemas
class UserResponse(BaseModel):
    """Schema for the signed-in user."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    username: Optional[str] = None
    is_public: bool
    created_at: datetime
    updated_at: datetime


class PublicUserResponse(BaseModel):
    """Public profile data (no email)."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    username: str
    name: Optional[str] = None
    image: Optional[str] = None


class PublicProfileResponse(BaseModel):
    """Public profile with its rolling 12-month stats and calendar."""
    user: PublicUserResponse
    stats: UserStats
    calendar: CalendarResponse
