"""제공자 디렉터리 서비스 — 등록, 로그인, 검색, 상태/프로필 관리.

Provider Directory Service — Registration, login, directory search and
status/profile management for auto-service providers.
Every response strips the password hash.
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.config import Settings
from workshopfinder.models.provider import Provider
from workshopfinder.repositories.provider_repository import provider_repository
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
from workshopfinder.utils.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from workshopfinder.utils.jwt import create_access_token
from workshopfinder.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)

PROVIDER_ROLE: str = "provider"


class ProviderService:
    """제공자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling provider business logic.
    """

    def to_response(self, provider: Provider) -> ProviderResponse:
        """제공자 모델을 응답 스키마로 변환합니다 (비밀번호 제외).

        Convert a Provider model instance to a ProviderResponse schema.

        Args:
            provider: 제공자 모델 (Provider model instance)

        Returns:
            ProviderResponse: 제공자 응답 (Provider response, password excluded)
        """
        return ProviderResponse(
            id=str(provider.id),
            name=provider.name,
            email=provider.email,
            phone=provider.phone,
            service_type=provider.service_type,
            location=provider.location,
            experience=provider.experience,
            description=provider.description,
            availability=provider.availability,
            approved=provider.approved,
            created_at=provider.created_at,
            updated_at=provider.updated_at,
        )

    async def _get_or_404(self, db: AsyncSession, provider_id: UUID) -> Provider:
        provider: Provider | None = await provider_repository.get_by_id(db, provider_id)
        if provider is None:
            raise NotFoundError("Provider not found")
        return provider

    async def register(
        self,
        db: AsyncSession,
        data: ProviderRegisterRequest,
    ) -> ProviderEnvelope:
        """새 제공자를 등록합니다. 관리자 승인 없이 즉시 활성.

        Register a new provider. The account is available and approved
        immediately; no moderation step exists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 등록 요청 데이터 (Registration request data)

        Returns:
            ProviderEnvelope: 생성된 제공자 응답 (Created provider response)

        Raises:
            DuplicateError: 같은 이메일의 제공자가 이미 존재할 때
                            (When a provider with this email already exists)
        """
        if await provider_repository.get_by_email(db, data.email) is not None:
            raise DuplicateError("Provider already exists with this email")

        try:
            provider: Provider = await provider_repository.create(
                db,
                {
                    "name": data.name,
                    "email": data.email,
                    "phone": data.phone,
                    "service_type": data.service_type,
                    "location": data.location,
                    "experience": data.experience,
                    "description": data.description,
                    "password_hash": hash_password(data.password),
                    "availability": True,
                    "approved": True,
                },
            )
        except IntegrityError:
            # 동시 등록 경합 — A concurrent registration won the unique index
            await db.rollback()
            raise DuplicateError("Provider already exists with this email")

        logger.info("Provider registered: %s (%s)", provider.id, provider.service_type)
        return ProviderEnvelope(
            message="Provider registered successfully!",
            provider=self.to_response(provider),
        )

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
        settings: Settings,
    ) -> ProviderLoginResponse:
        """제공자 로그인을 처리합니다. 승인 여부는 확인하지 않음.

        Authenticate a provider and issue an access token.
        The approved flag is not consulted.

        Raises:
            NotFoundError: 이메일이 없을 때 (Unknown email)
            UnauthorizedError: 비밀번호 불일치 (Password mismatch)
        """
        provider: Provider | None = await provider_repository.get_by_email(db, data.email)
        if provider is None:
            raise NotFoundError("Provider not found")

        if not verify_password(data.password, provider.password_hash):
            logger.warning("Provider login failed: bad password for %s", provider.id)
            raise UnauthorizedError("Invalid credentials")

        return ProviderLoginResponse(
            message="Login successful",
            provider=self.to_response(provider),
            token=create_access_token(provider.id, PROVIDER_ROLE, settings),
        )

    async def list_providers(self, db: AsyncSession) -> list[ProviderResponse]:
        """전체 제공자 목록 (All providers, creation order)."""
        providers = await provider_repository.get_all(db)
        return [self.to_response(p) for p in providers]

    async def list_available(self, db: AsyncSession) -> list[ProviderResponse]:
        """예약 가능한 제공자 목록 (Providers with availability set)."""
        providers = await provider_repository.get_available(db)
        return [self.to_response(p) for p in providers]

    async def list_by_service_type(
        self,
        db: AsyncSession,
        service_type: str,
    ) -> list[ProviderResponse]:
        """서비스 분류로 예약 가능한 제공자를 검색합니다.

        Case-insensitive substring search on service type, restricted to
        available providers.
        """
        providers = await provider_repository.search_by_service_type(db, service_type)
        return [self.to_response(p) for p in providers]

    async def get_provider(self, db: AsyncSession, provider_id: UUID) -> ProviderResponse:
        """제공자 단건 조회.

        Raises:
            NotFoundError: 제공자를 찾을 수 없을 때 (Provider not found)
        """
        return self.to_response(await self._get_or_404(db, provider_id))

    async def update_status(
        self,
        db: AsyncSession,
        provider_id: UUID,
        data: ProviderStatusUpdate,
    ) -> ProviderEnvelope:
        """제공자의 예약 가능 상태를 변경합니다.

        Update a provider's availability. An explicit ``availability`` wins;
        otherwise a non-empty ``status`` maps "active" to True and any other
        value to False. With neither supplied the record is left unchanged.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            provider_id: 제공자 ID (Provider UUID)
            data: 상태 변경 데이터 (Status update data)

        Returns:
            ProviderEnvelope: 변경된 제공자 응답 (Updated provider response)

        Raises:
            NotFoundError: 제공자를 찾을 수 없을 때 (Provider not found)
        """
        availability: bool | None = None
        if data.availability is not None:
            availability = data.availability
        elif data.status:
            availability = data.status == "active"

        if availability is not None:
            updated: bool = await provider_repository.update_fields(
                db, provider_id, {"availability": availability}
            )
            if not updated:
                raise NotFoundError("Provider not found")
            logger.info("Provider %s availability set to %s", provider_id, availability)

        provider: Provider = await self._get_or_404(db, provider_id)
        return ProviderEnvelope(
            message="Provider status updated successfully",
            provider=self.to_response(provider),
        )

    async def update_profile(
        self,
        db: AsyncSession,
        provider_id: UUID,
        data: ProviderProfileUpdate,
    ) -> ProviderEnvelope:
        """제공자 프로필을 부분 수정합니다. 빈 값은 무시.

        Sparse profile update: only supplied, non-empty values overwrite.

        Raises:
            NotFoundError: 제공자를 찾을 수 없을 때 (Provider not found)
        """
        values: dict[str, Any] = {
            field: value for field, value in data.model_dump().items() if value
        }
        if values:
            updated: bool = await provider_repository.update_fields(db, provider_id, values)
            if not updated:
                raise NotFoundError("Provider not found")

        provider: Provider = await self._get_or_404(db, provider_id)
        return ProviderEnvelope(
            message="Profile updated successfully",
            provider=self.to_response(provider),
        )

    async def delete_provider(self, db: AsyncSession, provider_id: UUID) -> MessageResponse:
        """제공자를 삭제합니다. 기존 예약은 그대로 남음.

        Delete a provider permanently. Bookings referencing it are kept.

        Raises:
            NotFoundError: 제공자를 찾을 수 없을 때 (Provider not found)
        """
        deleted: bool = await provider_repository.delete(db, provider_id)
        if not deleted:
            raise NotFoundError("Provider not found")
        logger.info("Provider deleted: %s", provider_id)
        return MessageResponse(message="Provider deleted successfully")

    async def get_me(self, db: AsyncSession, provider_id: UUID) -> ProviderResponse:
        """인증된 제공자의 프로필 (Return the authenticated provider's profile)."""
        provider: Provider | None = await provider_repository.get_by_id(db, provider_id)
        if provider is None:
            raise UnauthorizedError("Account no longer exists")
        return self.to_response(provider)


# 싱글턴 인스턴스 — Singleton instance
provider_service: ProviderService = ProviderService()
