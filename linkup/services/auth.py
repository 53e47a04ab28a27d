"""Auth Service — user registration and password login.

Invariants:
    - Email is unique; registering a taken email is 409
    - Login failures never reveal whether the email exists (401 either way)
    - Registration creates the user and its profile in one commit
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.errors import AuthenticationError, DuplicateResourceError
from linkup.infrastructure.passwords import hash_password, verify_password
from linkup.models.user import User, UserProfile
from linkup.schemas.auth import LoginRequest, RegisterRequest
from linkup.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)


async def _find_user(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def register_user(
    db: AsyncSession, body: RegisterRequest, bcrypt_rounds: int,
) -> User:
    if await _find_user(db, body.email):
        raise DuplicateResourceError("User", "email", body.email)
    user = User(
        email=body.email,
        password_hash=await hash_password(body.password, bcrypt_rounds),
    )
    user.profile = UserProfile(name=body.name or "")
    db.add(user)
    await commit_or_conflict(db, "User", "email", body.email)
    logger.info(f"User {user.id} registered", extra={"user_id": user.id})
    return user


async def authenticate(db: AsyncSession, body: LoginRequest) -> User:
    user = await _find_user(db, body.email)
    if not user or not await verify_password(body.password, user.password_hash):
        logger.warning("Failed login attempt")
        raise AuthenticationError()
    logger.info(f"User {user.id} logged in", extra={"user_id": user.id})
    return user
