"""서비스 제공자 SQLAlchemy ORM 모델 정의.

Service provider SQLAlchemy ORM model definition.

Tables:
    - providers: 정비/세차/도장 등 서비스 제공자 (Auto-service providers)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from workshopfinder.database import Base


class Provider(Base):
    """서비스 제공자 모델 — 예약 가능한 정비 업체/기사.

    Provider model — A service professional offering bookable auto-repair services.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 업체/기사 이름 (Business or professional name)
        email: 이메일 (Login email, unique among providers)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        phone: 연락처 (Contact phone)
        service_type: 서비스 분류, 자유 텍스트 (Service category, free text)
        location: 위치, 자유 텍스트 (Location, free text)
        experience: 경력 (Experience, free text, optional)
        description: 소개 (Description, optional)
        availability: 예약 가능 여부 (Shown in bookable listings when True)
        approved: 승인 플래그 (Moderation flag; never gates behavior)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "providers"

    # 제공자 고유 식별자 — Provider unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Login email (제공자 테이블 내 고유, unique among providers)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    # 서비스 분류 — e.g. "Mechanic Services", "Car Wash & Detailing"
    service_type: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    experience: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 예약 가능 여부 — Whether the provider appears in bookable listings
    availability: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    # 승인 플래그 — 가입 시 자동 True, 어떤 동작도 막지 않음 (Set True on registration, non-gating)
    approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
