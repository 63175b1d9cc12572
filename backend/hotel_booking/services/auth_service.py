"""
Authentication service handling user registration and login.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from hotel_booking.models.session import Session
from hotel_booking.models.user import User
from hotel_booking.schemas.user import UserCreate, UserLogin, Token
from hotel_booking.core.security import hash_password, verify_password, create_access_token
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


async def register_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Register a new user with hashed password.
    Raises 409 if email or username already exists.
    """
    result = await db.execute(select(User).where(User.email == user_data.email))
    if result.scalar_one_or_none():
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    result = await db.execute(select(User).where(User.username == user_data.username))
    if result.scalar_one_or_none():
        logger.warning("registration_failed", reason="username_exists", username=user_data.username)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken",
        )

    user = User(
        email=user_data.email,
        username=user_data.username,
        hashed_password=hash_password(user_data.password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("user_registered", user_id=user.id, email=user.email)
    return user


async def open_session(db: AsyncSession, user: User) -> Session:
    """Issue a token for `user` and persist it as a session."""
    token = create_access_token(data={"sub": str(user.id)})
    session = Session(user_id=user.id, token=token)
    db.add(session)
    await db.flush()
    return session


async def authenticate_user(db: AsyncSession, login_data: UserLogin) -> Token:
    """
    Check credentials and open a session.
    Raises 401 if credentials are invalid, 403 if the account is deactivated.
    """
    result = await db.execute(select(User).where(User.email == login_data.email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(login_data.password, user.hashed_password):
        logger.warning("login_failed", email=login_data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated",
        )

    session = await open_session(db, user)
    logger.info("user_logged_in", user_id=user.id, session_id=session.id)
    return Token(access_token=session.token, user_id=user.id)
