"""예약 라우터 — 예약 생성, 당사자별 목록, 상태 변경.

Booking Router — Create bookings, list them per customer or provider,
and change their status.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.api.deps import get_settings
from workshopfinder.config import Settings
from workshopfinder.database import get_db
from workshopfinder.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingStatusUpdate,
    BookingWithProviderResponse,
    BookingWithUserResponse,
)
from workshopfinder.services.booking_service import booking_service

router: APIRouter = APIRouter()


@router.post("", response_model=BookingResponse, status_code=201)
async def create_booking(
    data: BookingCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BookingResponse:
    """예약 생성 — 고객/제공자가 없으면 404, 상태는 항상 pending.

    Create a booking. 404 when the customer or provider is missing.
    """
    result: BookingResponse = await booking_service.create_booking(db, data)
    await db.commit()
    return result


@router.get("/user/{user_id}", response_model=list[BookingWithProviderResponse])
async def list_user_bookings(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[BookingWithProviderResponse]:
    """고객의 예약 목록 (Bookings of a customer, provider embedded)."""
    return await booking_service.list_for_user(db, user_id)


@router.get("/provider/{provider_id}", response_model=list[BookingWithUserResponse])
async def list_provider_bookings(
    provider_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[BookingWithUserResponse]:
    """제공자의 예약 목록 (Bookings of a provider, customer embedded)."""
    return await booking_service.list_for_provider(db, provider_id)


@router.put("/{booking_id}/status", response_model=BookingResponse)
async def update_booking_status(
    booking_id: UUID,
    data: BookingStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> BookingResponse:
    """예약 상태 변경 — 허용되지 않는 전이는 400.

    Change a booking's status. Illegal transitions return 400 unless
    BOOKING_ENFORCE_TRANSITIONS is disabled.
    """
    result: BookingResponse = await booking_service.update_status(
        db, booking_id, data.status, settings.BOOKING_ENFORCE_TRANSITIONS
    )
    await db.commit()
    return result
