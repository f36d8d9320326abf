"""고객 계정 라우터 — 회원가입, 로그인, 내 정보.

User (customer) Router — Signup, login and current-profile endpoints.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.api.deps import get_settings, require_customer
from workshopfinder.config import Settings
from workshopfinder.database import get_db
from workshopfinder.schemas.auth import LoginRequest
from workshopfinder.schemas.user import (
    UserEnvelope,
    UserLoginResponse,
    UserRegisterRequest,
    UserResponse,
)
from workshopfinder.services.user_service import user_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=UserEnvelope, status_code=201)
async def register_user(
    data: UserRegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserEnvelope:
    """고객 회원가입 — 이메일 중복 시 400.

    Register a customer account. Returns 400 when the email is taken.
    """
    result: UserEnvelope = await user_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=UserLoginResponse)
async def login_user(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserLoginResponse:
    """고객 로그인 — 액세스 토큰 발급.

    Customer login. Returns the profile and a signed access token.
    """
    return await user_service.login(db, data, settings)


@router.get("/me", response_model=UserResponse)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[UUID, Depends(require_customer)],
) -> UserResponse:
    """현재 고객 프로필 조회 (Profile of the authenticated customer)."""
    return await user_service.get_me(db, user_id)
