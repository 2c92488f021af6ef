"""
User endpoints.

Signed-in profile and public profiles.
"""

import datetime

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_today
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import PublicProfileResponse, PublicUserResponse, UserResponse, UserUpdate
from app.services.grid_service import GridService
from app.services.stats_service import StatsService
from app.services.user_service import UserService
from app.sicksquares.date_range import GridMode

router = APIRouter()


@router.get("/me", summary="Signed-in user info.", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user


@router.patch("/me", summary="Update username and/or profile visibility.", response_model=UserResponse)
def update_me(data: UserUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return UserService(db).update_profile(user, data)


@router.get("/{username}", summary="Public profile with last-12-months stats.", response_model=PublicProfileResponse)
def public_profile(username: str, db: Session = Depends(get_db), today: datetime.date = Depends(get_today)):
    """Only profiles marked public are visible; others answer 404."""
    user = UserService(db).get_public_user(username)
    stats = StatsService(db).get_rolling_stats(user.id, today)
    calendar = GridService(db).get_calendar(user.id, GridMode.ROLLING, today)
    return PublicProfileResponse(user=PublicUserResponse.model_validate(user), stats=stats.stats, calendar=calendar)
