"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations. Updates and
deletes are issued as single statements keyed by id instead of
fetch-mutate-save, so concurrent writers never overwrite each other's
untouched columns.

Usage:
    class ProviderRepository(BaseRepository[Provider]):
        def __init__(self) -> None:
            super().__init__(Provider)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID. Always reloads column values
        from the database so results reflect statement-level updates.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = (
            select(self.model)
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_one_by(
        self,
        db: AsyncSession,
        **filters: Any,
    ) -> ModelType | None:
        """컬럼 값 일치 조건으로 단일 레코드를 조회합니다.

        Retrieve a single record matching all ``column=value`` filters.
        """
        query: Select = select(self.model)
        for column_name, value in filters.items():
            query = query.where(getattr(self.model, column_name) == value)
        result = await db.execute(query.limit(1))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼, None이면 생성 순 (Column to order by; creation order when None)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.created_at)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update_fields(
        self,
        db: AsyncSession,
        record_id: UUID,
        values: dict[str, Any],
        *conditions: Any,
    ) -> bool:
        """단일 UPDATE 문으로 지정된 컬럼만 갱신합니다.

        Set the given columns on one record with a single UPDATE statement.
        Extra ``conditions`` turn it into a conditional update that only
        applies while the row still matches them.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드의 UUID (UUID of the record to update)
            values: 갱신할 컬럼과 값 (Columns and values to set)
            conditions: 추가 WHERE 조건 (Additional WHERE clauses)

        Returns:
            bool: 행이 갱신되었는지 여부 (Whether a row was updated)
        """
        stmt = (
            update(self.model)
            .where(self.model.id == record_id, *conditions)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount > 0

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its UUID.

        Returns:
            bool: 삭제 성공 여부 (Whether a row was deleted)
        """
        stmt = (
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount > 0
