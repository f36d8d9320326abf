"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
The engine and session factory live on a ``Database`` handle that the
application factory constructs and stores on ``app.state``; request
handlers receive sessions through the ``get_db`` dependency.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


class Database:
    """비동기 엔진과 세션 팩토리를 묶은 저장소 핸들.

    Store handle bundling an async engine and its session factory.
    One instance per application (or per test case).

    Attributes:
        engine: 비동기 데이터베이스 엔진 (Async database engine)
        session_factory: 비동기 세션 팩토리 (Async session factory)
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            # 인메모리 SQLite는 단일 커넥션을 공유해야 테이블이 유지됨
            # In-memory SQLite must share one connection for tables to persist
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url:
                engine_kwargs["poolclass"] = StaticPool
        else:
            # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
            engine_kwargs.update(pool_pre_ping=True, pool_size=5, max_overflow=10)

        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        # expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """ORM 메타데이터로 테이블을 생성합니다 (이미 있으면 건너뜀).

        Create all tables registered on ``Base.metadata`` if missing.
        """
        # 모델 모듈을 임포트해야 메타데이터에 테이블이 등록됨
        import workshopfinder.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session from the
    ``Database`` handle attached to the running application.
    The session is automatically closed after the request completes,
    ensuring no connection leaks.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
