"""초기 데이터 시드 스크립트 — 서비스 분류별 샘플 제공자 생성.

Seed script — Creates tables and one sample provider per service category
offered by the front-end, so the directory is not empty on a fresh install.

Usage:
    python -m workshopfinder.seed

Idempotent: 이미 존재하는 이메일은 건너뜁니다 (Existing emails are skipped).
"""

import asyncio
import logging

from workshopfinder.config import settings
from workshopfinder.database import Database
from workshopfinder.repositories.provider_repository import provider_repository
from workshopfinder.schemas.provider import ProviderRegisterRequest
from workshopfinder.services.provider_service import provider_service
from workshopfinder.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# 샘플 비밀번호 — 로컬 개발 전용 (Local development only)
SAMPLE_PASSWORD: str = "workshop123"

# (이름, 서비스 분류, 위치) — (name, service type, location)
SAMPLE_PROVIDERS: list[tuple[str, str, str]] = [
    ("Joe's Garage", "Mechanic Services", "Downtown"),
    ("Sparkle Auto Spa", "Car Wash & Detailing", "Northside"),
    ("Precision Paint & Body", "Painting & Body Work", "Eastside"),
    ("Volt Auto Electric", "Electrical Systems", "Westside"),
    ("Tread Masters", "Tire Services", "Airport Road"),
    ("Cool Breeze Auto AC", "AC Service", "Southside"),
    ("StopRight Brakes", "Brake Services", "Old Town"),
    ("QuickLube Express", "Oil Change", "Main Street"),
    ("Steady Care Motors", "General Maintenance", "Riverside"),
]


def _sample_email(name: str) -> str:
    slug = "".join(ch for ch in name.lower() if ch.isalnum())
    return f"{slug}@example.com"


async def seed(database: Database) -> int:
    """데이터베이스를 샘플 제공자로 시드합니다.

    Seed the database with sample providers.

    Args:
        database: 대상 저장소 핸들 (Target store handle)

    Returns:
        int: 새로 생성된 제공자 수 (Number of providers created)
    """
    await database.create_all()

    created: int = 0
    async with database.session_factory() as db:
        for name, service_type, location in SAMPLE_PROVIDERS:
            email = _sample_email(name)
            if await provider_repository.get_by_email(db, email) is not None:
                continue
            await provider_service.register(
                db,
                ProviderRegisterRequest(
                    name=name,
                    email=email,
                    password=SAMPLE_PASSWORD,
                    phone="555-0100",
                    service_type=service_type,
                    location=location,
                    experience="5 years",
                    description=f"{service_type} in {location}.",
                ),
            )
            created += 1
        await db.commit()

    if created:
        logger.info("Seeded %d providers", created)
    else:
        logger.info("Already seeded. Skipping.")
    return created


async def main() -> None:
    setup_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        await seed(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
