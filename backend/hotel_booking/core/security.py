"""
Password hashing, JWT issuing, and the authenticated-user dependency.

A bearer token is accepted only when it decodes with our secret AND a
session row holding that exact token exists. Logging out (deleting the
session) therefore revokes a token before it expires.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.config import get_settings
from hotel_booking.core.logging import get_logger
from hotel_booking.db.session import get_db
from hotel_booking.models.session import Session

logger = get_logger(__name__)
settings = get_settings()

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

# auto_error=False so a missing header yields 401 rather than FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT. `data["sub"]` carries the user id as a string."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    # jti keeps tokens unique; sessions store them under a unique index
    to_encode.update({"exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_user_id(token: str) -> int:
    """Decode a token and return the user id it was issued for. Raises 401."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise _unauthorized("Invalid or expired token")

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload")


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    if credentials is None:
        raise _unauthorized("Not authenticated")

    user_id = decode_user_id(credentials.credentials)

    result = await db.execute(
        select(Session.id).where(
            Session.token == credentials.credentials,
            Session.user_id == user_id,
        )
    )
    if result.scalar_one_or_none() is None:
        logger.warning("auth_failed", reason="no_session", user_id=user_id)
        raise _unauthorized("Session not found")

    return user_id
