"""제공자 레포지토리 — 제공자 CRUD 및 디렉터리 검색 쿼리.

Provider Repository — CRUD and directory search queries for providers.
Extends BaseRepository with email lookup, availability filtering and
case-insensitive service type search.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.models.provider import Provider
from workshopfinder.repositories.base import BaseRepository


class ProviderRepository(BaseRepository[Provider]):
    """제공자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the providers table.
    """

    def __init__(self) -> None:
        super().__init__(Provider)

    async def get_by_email(self, db: AsyncSession, email: str) -> Provider | None:
        """이메일로 제공자를 조회합니다 (Retrieve a provider by email)."""
        return await self.get_one_by(db, email=email)

    async def get_available(self, db: AsyncSession) -> list[Provider]:
        """예약 가능한 제공자 목록을 조회합니다.

        Retrieve all providers whose availability flag is set.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[Provider]: 예약 가능한 제공자 목록 (Available providers, creation order)
        """
        return list(await self.get_all(db, filters={"availability": True}))

    async def search_by_service_type(
        self,
        db: AsyncSession,
        term: str,
    ) -> list[Provider]:
        """서비스 분류에 검색어가 포함된 예약 가능 제공자를 조회합니다.

        Retrieve available providers whose service type contains ``term``,
        ignoring case. ``%`` and ``_`` in the term are matched literally.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            term: 서비스 분류 검색어 (Service type search term)

        Returns:
            list[Provider]: 일치하는 제공자 목록 (Matching providers, creation order)
        """
        query: Select = (
            select(Provider)
            .where(
                func.lower(Provider.service_type).contains(term.lower(), autoescape=True),
                Provider.availability == True,  # noqa: E712
            )
            .order_by(Provider.created_at)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
provider_repository: ProviderRepository = ProviderRepository()
