"""
Debug endpoint, only mounted when ``DEBUG`` is enabled.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_identity
from app.core.security import TokenIdentity
from app.db.repositories.sick_day import SickDayRepository
from app.db.session import get_db
from app.models.user import User
from app.schemas.sick_day import SickDayResponse
from app.schemas.user import UserResponse

router = APIRouter()


@router.get("", summary="Inspect the signed-in user's stored data.")
def debug(identity: TokenIdentity = Depends(get_identity), db: Session = Depends(get_db),
          user: User = Depends(get_current_user), ):
    repo = SickDayRepository(db)
    return {
        "session": {"email": identity.email, "name": identity.name},
        "user": UserResponse.model_validate(user).model_dump(mode="json", by_alias=True),
        "recentGridData": [
            SickDayResponse.model_validate(e).model_dump(mode="json", by_alias=True)
            for e in repo.get_latest_by_user(user.id, limit=10)
        ],
        "totalEntries": repo.count_by_user(user.id),
    }
