"""제공자 라우터 — 등록/로그인, 디렉터리 조회, 상태/프로필 관리.

Provider Router — Registration/login, directory listings, and
status/profile management endpoints.

Static paths (/available, /service/..., /me) are declared before
/{provider_id} so they are not captured by the id route.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.api.deps import get_settings, require_provider
from workshopfinder.config import Settings
from workshopfinder.database import get_db
from workshopfinder.schemas.auth import LoginRequest
from workshopfinder.schemas.common import MessageResponse
from workshopfinder.schemas.provider import (
    ProviderEnvelope,
    ProviderLoginResponse,
    ProviderProfileUpdate,
    ProviderRegisterRequest,
    ProviderResponse,
    ProviderStatusUpdate,
)
from workshopfinder.services.provider_service import provider_service

router: APIRouter = APIRouter()


# === 인증 (Authentication) ===

@router.post("/register", response_model=ProviderEnvelope, status_code=201)
async def register_provider(
    data: ProviderRegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProviderEnvelope:
    """제공자 등록 — 이메일 중복 시 400.

    Register a provider. The account is available and approved immediately.
    """
    result: ProviderEnvelope = await provider_service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=ProviderLoginResponse)
async def login_provider(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProviderLoginResponse:
    """제공자 로그인 — 액세스 토큰 발급.

    Provider login. Returns the profile and a signed access token.
    """
    return await provider_service.login(db, data, settings)


@router.get("/me", response_model=ProviderResponse)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    provider_id: Annotated[UUID, Depends(require_provider)],
) -> ProviderResponse:
    """현재 제공자 프로필 조회 (Profile of the authenticated provider)."""
    return await provider_service.get_me(db, provider_id)


# === 디렉터리 조회 (Directory) ===

@router.get("", response_model=list[ProviderResponse])
async def list_providers(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProviderResponse]:
    """전체 제공자 목록 (All providers)."""
    return await provider_service.list_providers(db)


@router.get("/available", response_model=list[ProviderResponse])
async def list_available_providers(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProviderResponse]:
    """예약 가능한 제공자 목록 (Providers currently taking bookings)."""
    return await provider_service.list_available(db)


@router.get("/service/{service_type}", response_model=list[ProviderResponse])
async def list_providers_by_service_type(
    service_type: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProviderResponse]:
    """서비스 분류 검색 — 대소문자 무시 부분 일치, 예약 가능 제공자만.

    Case-insensitive substring match on service type, available providers only.
    """
    return await provider_service.list_by_service_type(db, service_type)


@router.get("/{provider_id}", response_model=ProviderResponse)
async def get_provider(
    provider_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProviderResponse:
    """제공자 단건 조회 (Single provider)."""
    return await provider_service.get_provider(db, provider_id)


# === 관리 (Management) ===

@router.put("/{provider_id}/status", response_model=ProviderEnvelope)
async def update_provider_status(
    provider_id: UUID,
    data: ProviderStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProviderEnvelope:
    """예약 가능 상태 변경 (Toggle availability)."""
    result: ProviderEnvelope = await provider_service.update_status(db, provider_id, data)
    await db.commit()
    return result


@router.put("/{provider_id}/profile", response_model=ProviderEnvelope)
async def update_provider_profile(
    provider_id: UUID,
    data: ProviderProfileUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProviderEnvelope:
    """프로필 부분 수정 (Sparse profile update)."""
    result: ProviderEnvelope = await provider_service.update_profile(db, provider_id, data)
    await db.commit()
    return result


@router.delete("/{provider_id}", response_model=MessageResponse)
async def delete_provider(
    provider_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """제공자 삭제 — 예약은 삭제하지 않음.

    Delete a provider. Its bookings are left in place.
    """
    result: MessageResponse = await provider_service.delete_provider(db, provider_id)
    await db.commit()
    return result
