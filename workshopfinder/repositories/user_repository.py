"""고객 레포지토리 — 고객 계정 조회/생성.

User Repository — Customer account lookups and creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.models.user import User
from workshopfinder.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """고객 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 고객을 조회합니다 (Retrieve a customer by email)."""
        return await self.get_one_by(db, email=email)


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
