"""테스트 인프라 — 테스트별 임시 DB, 앱, httpx 클라이언트 픽스처.

Test infrastructure — Per-test database, application and httpx client fixtures.
Each test gets a fresh SQLite file (aiosqlite) under pytest's tmp_path;
set TEST_DATABASE_URL to run against another database (tables are
dropped after each test in that case).
"""

import os
from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.config import Settings
from workshopfinder.database import Database
from workshopfinder.main import create_app
from workshopfinder.models import Booking, Provider, User
from workshopfinder.utils.jwt import create_access_token
from workshopfinder.utils.password import hash_password

TEST_PASSWORD = "secret123"
# 테스트 해시는 낮은 비용으로 — Cheap bcrypt cost for fixtures
TEST_PASSWORD_HASH = hash_password(TEST_PASSWORD, rounds=4)


def make_settings(database_url: str, **overrides: Any) -> Settings:
    """테스트용 설정 — .env 파일 무시 (Test settings, ignores .env)."""
    values: dict[str, Any] = {
        "DATABASE_URL": database_url,
        "JWT_SECRET_KEY": "test-secret-key-for-the-workshopfinder-suite",
        "AXIOM_API_TOKEN": "",
        "AXIOM_DATASET": "",
        "DEBUG": False,
        "BOOKING_ENFORCE_TRANSITIONS": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def client_for(app: FastAPI, raise_app_exceptions: bool = True) -> AsyncClient:
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return AsyncClient(transport=transport, base_url="http://test")


# ---------------------------------------------------------------------------
# Function-scoped: 저장소, 설정, 앱, 클라이언트
# ---------------------------------------------------------------------------
@pytest.fixture
def database_url(tmp_path) -> str:
    return os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def database(database_url: str) -> AsyncGenerator[Database, None]:
    """스키마가 생성된 테스트 저장소 핸들."""
    db_handle = Database(database_url)
    await db_handle.create_all()
    yield db_handle
    if "TEST_DATABASE_URL" in os.environ:
        await db_handle.drop_all()
    await db_handle.dispose()


@pytest.fixture
def settings(database_url: str) -> Settings:
    return make_settings(database_url)


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    return create_app(settings, database)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 앱과 같은 저장소를 사용합니다."""
    async with client_for(app) as ac:
        yield ac


@pytest_asyncio.fixture
async def db(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """테스트 데이터 준비/검증용 세션 (Session for arranging and checking data)."""
    async with database.session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def add_provider(db: AsyncSession, **fields: Any) -> Provider:
    """제공자를 직접 저장합니다 (Persist a provider directly)."""
    values: dict[str, Any] = {
        "name": "Joe's Garage",
        "email": "joe@garage.com",
        "password_hash": TEST_PASSWORD_HASH,
        "phone": "555-0101",
        "service_type": "Mechanic Services",
        "location": "Downtown",
        "availability": True,
        "approved": True,
    }
    values.update(fields)
    provider = Provider(**values)
    db.add(provider)
    await db.commit()
    await db.refresh(provider)
    return provider


async def add_user(db: AsyncSession, **fields: Any) -> User:
    """고객을 직접 저장합니다 (Persist a customer directly)."""
    values: dict[str, Any] = {
        "name": "Alice",
        "email": "alice@example.com",
        "password_hash": TEST_PASSWORD_HASH,
        "role": "customer",
    }
    values.update(fields)
    user = User(**values)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def provider(db: AsyncSession) -> Provider:
    """테스트 제공자를 생성합니다."""
    return await add_provider(db)


@pytest_asyncio.fixture
async def customer(db: AsyncSession) -> User:
    """테스트 고객을 생성합니다."""
    return await add_user(db)


@pytest_asyncio.fixture
async def booking(db: AsyncSession, customer: User, provider: Provider) -> Booking:
    """pending 상태의 테스트 예약을 생성합니다."""
    from datetime import datetime, timezone

    b = Booking(
        user_id=customer.id,
        provider_id=provider.id,
        date=datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc),
        vehicle_type="Sedan",
        issue_description="Brakes squeal",
        contact_phone="555-0199",
        status="pending",
    )
    db.add(b)
    await db.commit()
    await db.refresh(b)
    return b


def make_token(account: Any, role: str, settings: Settings) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(account.id, role, settings)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
