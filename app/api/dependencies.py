"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, rate limiting, the
current date and database access.
"""

import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.config import settings
from app.core.security import TokenIdentity, bearer_scheme, decode_access_token
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService


def get_today() -> datetime.date:
    """Local calendar date in ``APP_TIMEZONE``."""
    return datetime.datetime.now(ZoneInfo(settings.APP_TIMEZONE)).date()


def get_identity(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme), ) -> TokenIdentity:
    """Validate the bearer token."""
    identity = decode_access_token(credentials.credentials) if credentials else None
    if identity is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return identity


def get_current_user(identity: TokenIdentity = Depends(get_identity), db: Session = Depends(get_db), ) -> User:
    """Resolve the signed-in user, provisioning it on first use."""
    return UserService(db).ensure_user(identity)


def rate_limit(request: Request, identity: TokenIdentity = Depends(get_identity)) -> None:
    """Reject the request with 429 once the caller exceeds its quota."""
    limiter = request.app.state.rate_limiter
    if not limiter.hit(identity.email):
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Too many requests",
                            headers={ "Retry-After": str(limiter.retry_after(identity.email)) }, )
