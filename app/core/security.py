"""
Bearer token handling.

Sign-in happens at the external OAuth provider; the front-end then holds a
short-lived HS256 JWT signed with ``SECRET_KEY``.  Its ``sub`` claim is the
user's email, with optional ``name`` and ``picture`` claims.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi.security import HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from app.core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


class TokenIdentity(BaseModel):
    """Identity carried by a validated access token."""
    email: str
    name: Optional[str] = None
    image: Optional[str] = None


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign ``data`` into a JWT that expires after ``expires_delta``."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenIdentity]:
    """Validate ``token``; returns None if it is invalid, expired or has no subject."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    email = payload.get("sub")
    if not email:
        return None
    return TokenIdentity(email=email, name=payload.get("name"), image=payload.get("picture"))
