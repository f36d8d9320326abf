"""서비스 제공자 Pydantic 요청/응답 스키마 정의.

Service provider Pydantic request/response schema definitions.
Covers registration, directory listings, status toggling and sparse
profile updates. Password hashes never appear in any response schema.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from workshopfinder.schemas.common import CamelModel


class ProviderRegisterRequest(CamelModel):
    """제공자 등록 요청 스키마.

    Provider registration request schema.

    Attributes:
        name: 업체/기사 이름 (Business or professional name)
        email: 이메일 (Login email, unique among providers)
        phone: 연락처 (Contact phone)
        service_type: 서비스 분류 (Service category, free text)
        location: 위치 (Location, free text)
        experience: 경력 (Experience, optional)
        description: 소개 (Description, optional)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
    """

    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    service_type: str = Field(min_length=1)
    location: str = Field(min_length=1)
    experience: str | None = None
    description: str | None = None
    password: str = Field(min_length=1)


class ProviderResponse(CamelModel):
    """제공자 응답 스키마 — 비밀번호 제외.

    Provider response schema (password excluded).
    """

    id: str
    name: str
    email: str
    phone: str
    service_type: str
    location: str
    experience: str | None
    description: str | None
    availability: bool
    approved: bool
    created_at: datetime
    updated_at: datetime


class ProviderEnvelope(CamelModel):
    """메시지 + 제공자 응답 (Message plus provider payload)."""

    message: str
    provider: ProviderResponse


class ProviderLoginResponse(ProviderEnvelope):
    """제공자 로그인 응답 — 액세스 토큰 포함 (Provider login response with access token)."""

    token: str
    token_type: str = "bearer"


class ProviderStatusUpdate(CamelModel):
    """제공자 상태 변경 요청 스키마.

    Provider status update request. ``availability`` wins when both are given;
    ``status`` maps "active" to available and anything else to unavailable.
    """

    status: str | None = None
    availability: bool | None = None


class ProviderProfileUpdate(CamelModel):
    """제공자 프로필 수정 요청 스키마 (부분 업데이트).

    Sparse profile update. Only non-empty supplied values overwrite.
    """

    name: str | None = None
    phone: str | None = None
    service_type: str | None = None
    location: str | None = None
    experience: str | None = None
    description: str | None = None
