"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata before ``create_all`` runs.

Modules:
    user: 고객 계정 (Customer accounts)
    provider: 서비스 제공자 (Service providers)
    booking: 예약 및 상태 (Bookings and their status lifecycle)
"""

from workshopfinder.models.user import User
from workshopfinder.models.provider import Provider
from workshopfinder.models.booking import Booking, BookingStatus

__all__ = [
    "User",
    "Provider",
    "Booking", "BookingStatus",
]
