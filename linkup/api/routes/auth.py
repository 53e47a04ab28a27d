"""Auth Routes — POST /api/register and POST /api/login.

Invariants:
    - Missing email/password → 400 (validation handler)
    - Taken email → 409; bad credentials → 401
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.config import Settings, get_settings
from linkup.infrastructure.database import get_db
from linkup.schemas.auth import AuthResult, LoginRequest, RegisterRequest
from linkup.schemas.common import MessageEnvelope
from linkup.services import auth as auth_service

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/register", response_model=MessageEnvelope[AuthResult],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = await auth_service.register_user(db, body, settings.bcrypt_rounds)
    return MessageEnvelope(
        message="Registration successful", data=AuthResult(user_id=user.id),
    )


@router.post("/login", response_model=MessageEnvelope[AuthResult])
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await auth_service.authenticate(db, body)
    return MessageEnvelope(
        message="Login successful", data=AuthResult(user_id=user.id),
    )
