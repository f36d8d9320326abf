"""예약 서비스 — 예약 생성, 당사자별 조회, 상태 전이 비즈니스 로직.

Booking Service — Business logic for creating bookings, listing them per
customer or provider, and moving them through the status lifecycle:

    pending ──▶ accepted ──▶ completed
       │
       └──────▶ rejected

No conflict check is made between bookings; the same provider and slot
may be booked more than once.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.models.booking import ALLOWED_PREDECESSORS, Booking, BookingStatus
from workshopfinder.repositories.booking_repository import booking_repository
from workshopfinder.repositories.provider_repository import provider_repository
from workshopfinder.repositories.user_repository import user_repository
from workshopfinder.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingWithProviderResponse,
    BookingWithUserResponse,
)
from workshopfinder.services.provider_service import provider_service
from workshopfinder.services.user_service import user_service
from workshopfinder.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class BookingService:
    """예약 관련 비즈니스 로직을 처리하는 서비스.

    Service handling booking business logic.
    """

    def _to_fields(self, booking: Booking) -> dict:
        return {
            "id": str(booking.id),
            "user_id": str(booking.user_id),
            "provider_id": str(booking.provider_id),
            "date": booking.date,
            "vehicle_type": booking.vehicle_type,
            "issue_description": booking.issue_description,
            "contact_phone": booking.contact_phone,
            "note": booking.note,
            "status": booking.status,
            "created_at": booking.created_at,
            "updated_at": booking.updated_at,
        }

    def to_response(self, booking: Booking) -> BookingResponse:
        return BookingResponse(**self._to_fields(booking))

    async def create_booking(
        self,
        db: AsyncSession,
        data: BookingCreate,
    ) -> BookingResponse:
        """새 예약을 생성합니다. 상태는 항상 pending.

        Create a booking between an existing customer and an existing provider.
        The new booking always starts as pending.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 예약 생성 데이터 (Booking creation data)

        Returns:
            BookingResponse: 생성된 예약 응답 (Created booking response)

        Raises:
            NotFoundError: 고객 또는 제공자가 존재하지 않을 때
                           (When the customer or the provider does not exist)
        """
        user = await user_repository.get_by_id(db, data.user_id)
        provider = await provider_repository.get_by_id(db, data.provider_id)
        if user is None or provider is None:
            raise NotFoundError("User or Provider not found")

        booking: Booking = await booking_repository.create(
            db,
            {
                "user_id": data.user_id,
                "provider_id": data.provider_id,
                "date": data.date,
                "vehicle_type": data.vehicle_type,
                "issue_description": data.issue_description,
                "contact_phone": data.contact_phone,
                "note": data.note,
                "status": BookingStatus.PENDING.value,
            },
        )
        logger.info("Booking %s created: user=%s provider=%s", booking.id, data.user_id, data.provider_id)
        return self.to_response(booking)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[BookingWithProviderResponse]:
        """고객의 예약 목록 — 제공자 정보 포함.

        List a customer's bookings with each provider embedded.
        """
        rows = await booking_repository.get_for_user(db, user_id)
        return [
            BookingWithProviderResponse(
                **self._to_fields(booking),
                provider=provider_service.to_response(provider) if provider is not None else None,
            )
            for booking, provider in rows
        ]

    async def list_for_provider(
        self,
        db: AsyncSession,
        provider_id: UUID,
    ) -> list[BookingWithUserResponse]:
        """제공자의 예약 목록 — 고객 정보 포함.

        List a provider's bookings with each customer embedded.
        """
        rows = await booking_repository.get_for_provider(db, provider_id)
        return [
            BookingWithUserResponse(
                **self._to_fields(booking),
                user=user_service.to_response(user) if user is not None else None,
            )
            for booking, user in rows
        ]

    async def update_status(
        self,
        db: AsyncSession,
        booking_id: UUID,
        status: BookingStatus,
        enforce_transitions: bool = True,
    ) -> BookingResponse:
        """예약 상태를 변경합니다.

        Move a booking to a new status. With ``enforce_transitions`` only the
        lifecycle edges are accepted (pending→accepted, pending→rejected,
        accepted→completed); the check and the write happen in one
        conditional UPDATE. Without it any status value overwrites the
        current one.

        Enforcement is the default (``BOOKING_ENFORCE_TRANSITIONS``). This
        departs from the endpoint's legacy contract, which overwrote the
        status unconditionally. Disabling the setting restores that behavior.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            booking_id: 예약 ID (Booking UUID)
            status: 새 상태 (Target status)
            enforce_transitions: 상태 전이 규칙 적용 여부 (Apply lifecycle rules)

        Returns:
            BookingResponse: 변경된 예약 응답 (Updated booking response)

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Booking not found)
            BadRequestError: 허용되지 않는 상태 전이 (Illegal status transition)
        """
        allowed_from: tuple[BookingStatus, ...] | None = (
            ALLOWED_PREDECESSORS[status] if enforce_transitions else None
        )

        updated: bool = False
        if allowed_from is None or allowed_from:
            updated = await booking_repository.set_status(db, booking_id, status, allowed_from)

        booking: Booking | None = await booking_repository.get_by_id(db, booking_id)
        if booking is None:
            raise NotFoundError("Booking not found")
        if not updated:
            raise BadRequestError(
                f"Invalid status transition: {booking.status} -> {status.value}"
            )

        logger.info("Booking %s status set to %s", booking_id, status.value)
        return self.to_response(booking)


# 싱글턴 인스턴스 — Singleton instance
booking_service: BookingService = BookingService()
