"""예약 Pydantic 요청/응답 스키마 정의.

Booking Pydantic request/response schema definitions.
List responses embed the counterpart record (provider for a customer's
bookings, customer for a provider's bookings).
"""

from datetime import date as calendar_date, datetime, time
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator

from workshopfinder.models.booking import BookingStatus
from workshopfinder.schemas.common import CamelModel
from workshopfinder.schemas.provider import ProviderResponse
from workshopfinder.schemas.user import UserResponse


class BookingCreate(CamelModel):
    """예약 생성 요청 스키마.

    Booking creation request schema. Any ``status`` sent by the client is
    ignored; new bookings always start as pending.

    Attributes:
        user_id: 고객 UUID (Customer identifier)
        provider_id: 제공자 UUID (Provider identifier)
        date: 예약 일시, 날짜만 주면 자정 (Service timestamp; a bare date means midnight)
        vehicle_type: 차량 종류 (Vehicle type)
        issue_description: 문제 설명 (Issue description)
        contact_phone: 연락처 (Contact phone)
        note: 메모 (Optional note)
    """

    user_id: UUID
    provider_id: UUID
    date: datetime
    vehicle_type: str = Field(min_length=1)
    issue_description: str = Field(min_length=1)
    contact_phone: str = Field(min_length=1)
    note: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _date_only_as_midnight(cls, value: Any) -> Any:
        # "2024-06-01" 형태 허용 — Accept plain calendar dates
        if isinstance(value, str) and len(value) == 10:
            try:
                return datetime.combine(calendar_date.fromisoformat(value), time.min)
            except ValueError:
                return value
        return value


class BookingStatusUpdate(CamelModel):
    """예약 상태 변경 요청 스키마 (Booking status update request)."""

    status: BookingStatus


class BookingResponse(CamelModel):
    """예약 응답 스키마 (Booking response schema)."""

    id: str
    user_id: str
    provider_id: str
    date: datetime
    vehicle_type: str
    issue_description: str
    contact_phone: str
    note: str | None
    status: str
    created_at: datetime
    updated_at: datetime


class BookingWithProviderResponse(BookingResponse):
    """제공자 정보가 포함된 예약 — 삭제된 제공자는 null.

    Booking with its provider embedded; null when the provider was deleted.
    """

    provider: ProviderResponse | None


class BookingWithUserResponse(BookingResponse):
    """고객 정보가 포함된 예약 (Booking with its customer embedded)."""

    user: UserResponse | None
