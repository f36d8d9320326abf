"""예약 레포지토리 — 예약 생성, 당사자별 목록, 상태 전이 쿼리.

Booking Repository — Booking creation, per-party listings and status
transitions. Listings join the counterpart record with an outer join so
bookings whose provider was deleted are still returned.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.models.booking import Booking, BookingStatus
from workshopfinder.models.provider import Provider
from workshopfinder.models.user import User
from workshopfinder.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    """예약 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the bookings table.
    """

    def __init__(self) -> None:
        super().__init__(Booking)

    async def get_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> list[tuple[Booking, Provider | None]]:
        """고객의 예약을 제공자 정보와 함께 조회합니다.

        Retrieve a customer's bookings, each paired with its provider
        (None when the provider no longer exists).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 고객 ID (Customer UUID)

        Returns:
            list[tuple[Booking, Provider | None]]: (예약, 제공자) 목록, 생성 순
                                                   ((booking, provider) pairs in creation order)
        """
        query: Select = (
            select(Booking, Provider)
            .outerjoin(Provider, Provider.id == Booking.provider_id)
            .where(Booking.user_id == user_id)
            .order_by(Booking.created_at)
        )
        result = await db.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def get_for_provider(
        self,
        db: AsyncSession,
        provider_id: UUID,
    ) -> list[tuple[Booking, User | None]]:
        """제공자의 예약을 고객 정보와 함께 조회합니다.

        Retrieve a provider's bookings, each paired with its customer.
        """
        query: Select = (
            select(Booking, User)
            .outerjoin(User, User.id == Booking.user_id)
            .where(Booking.provider_id == provider_id)
            .order_by(Booking.created_at)
        )
        result = await db.execute(query)
        return [(row[0], row[1]) for row in result.all()]

    async def set_status(
        self,
        db: AsyncSession,
        booking_id: UUID,
        status: BookingStatus,
        allowed_from: tuple[BookingStatus, ...] | None = None,
    ) -> bool:
        """예약 상태를 원자적으로 변경합니다.

        Atomically set a booking's status. When ``allowed_from`` is given the
        update only applies while the current status is one of those states.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            booking_id: 예약 ID (Booking UUID)
            status: 새 상태 (New status)
            allowed_from: 허용되는 현재 상태, None이면 무조건 변경
                          (Permitted current states; None overwrites unconditionally)

        Returns:
            bool: 행이 갱신되었는지 여부 (Whether the row was updated)
        """
        conditions = []
        if allowed_from is not None:
            conditions.append(Booking.status.in_([s.value for s in allowed_from]))
        return await self.update_fields(db, booking_id, {"status": status.value}, *conditions)


# 싱글턴 인스턴스 — Singleton instance
booking_repository: BookingRepository = BookingRepository()
