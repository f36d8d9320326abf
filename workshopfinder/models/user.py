"""고객 계정 SQLAlchemy ORM 모델 정의.

Customer account SQLAlchemy ORM model definition.

Tables:
    - users: 고객 계정 (Customer accounts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from workshopfinder.database import Base


class User(Base):
    """고객 모델 — 서비스를 예약하는 사용자.

    Customer model — An account that books services from providers.
    Email is unique among customers only; a provider may use the same address.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 이름 (Display name)
        email: 이메일 (Login email, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        role: 계정 종류 (Always "customer")
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 이름 — Customer display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — Login email (고객 테이블 내 고유, unique among customers)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 계정 종류 — Account role
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="customer")
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
