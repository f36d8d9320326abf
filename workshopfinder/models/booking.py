"""예약 SQLAlchemy ORM 모델 정의.

Booking SQLAlchemy ORM model definition.

Tables:
    - bookings: 고객-제공자 간 서비스 예약 (Service requests linking a customer and a provider)
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import CheckConstraint, String, DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from workshopfinder.database import Base


class BookingStatus(str, enum.Enum):
    """예약 상태 — Booking lifecycle states."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


# 상태 전이 규칙 — 대상 상태별 허용되는 이전 상태
# Allowed predecessor states for each target state
ALLOWED_PREDECESSORS: dict[BookingStatus, tuple[BookingStatus, ...]] = {
    BookingStatus.PENDING: (),
    BookingStatus.ACCEPTED: (BookingStatus.PENDING,),
    BookingStatus.REJECTED: (BookingStatus.PENDING,),
    BookingStatus.COMPLETED: (BookingStatus.ACCEPTED,),
}


class Booking(Base):
    """예약 모델 — 고객 1명과 제공자 1명을 잇는 서비스 요청.

    Booking model — A scheduled service request linking one customer and one provider.

    user_id/provider_id carry no database-level foreign key: deleting a provider
    leaves its bookings in place with a dangling provider_id.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 예약한 고객 ID (Owning customer UUID)
        provider_id: 예약된 제공자 ID (Booked provider UUID)
        date: 예약 일시 (Requested service timestamp)
        vehicle_type: 차량 종류 (Vehicle type, e.g. "Sedan")
        issue_description: 문제 설명 (Issue description)
        contact_phone: 연락처 (Contact phone)
        note: 메모 (Optional note)
        status: 예약 상태 (pending / accepted / rejected / completed)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True, nullable=False)
    provider_id: Mapped[uuid.UUID] = mapped_column(Uuid, index=True, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    vehicle_type: Mapped[str] = mapped_column(String(100), nullable=False)
    issue_description: Mapped[str] = mapped_column(Text, nullable=False)
    contact_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    # 예약 상태 — 기본값 pending (Default pending)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BookingStatus.PENDING.value)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'completed')",
            name="ck_booking_status",
        ),
    )
