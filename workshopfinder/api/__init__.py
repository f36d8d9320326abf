"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router
mounted under ``/api`` by the application factory.

Included routers:
    - users: 고객 계정 (Customer accounts)
    - providers: 제공자 디렉터리 (Provider directory)
    - bookings: 예약 (Bookings)
"""

from fastapi import APIRouter

from workshopfinder.api.bookings import router as bookings_router
from workshopfinder.api.providers import router as providers_router
from workshopfinder.api.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(providers_router, prefix="/providers", tags=["Providers"])
api_router.include_router(bookings_router, prefix="/bookings", tags=["Bookings"])
