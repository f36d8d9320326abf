"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
``create_app`` builds a fully wired application from a ``Settings``
instance; the module-level ``app`` is what ``uvicorn workshopfinder.main:app``
serves.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workshopfinder.api import api_router
from workshopfinder.config import Settings, settings as default_settings
from workshopfinder.database import Database
from workshopfinder.middleware.axiom_logging import AxiomLoggingMiddleware
from workshopfinder.utils.logging_config import setup_logging

logger: logging.Logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    axiom_client: Any | None = None,
) -> FastAPI:
    """애플리케이션 팩토리.

    Build the FastAPI application.

    Args:
        settings: 설정 인스턴스, 생략 시 환경 변수 기반 기본값 (Defaults to env-based settings)
        database: 저장소 핸들, 생략 시 DATABASE_URL로 생성 (Defaults to one built from DATABASE_URL)
        axiom_client: Axiom 클라이언트 주입용, 테스트 전용 (Injected Axiom client, for tests)

    Returns:
        FastAPI: 라우터/미들웨어가 등록된 앱 (Wired application)
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)
    database = database or Database(settings.DATABASE_URL, echo=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 시작 시 테이블 생성, 종료 시 커넥션 풀 정리
        await database.create_all()
        logger.info("%s started", settings.APP_NAME)
        yield
        await database.dispose()

    app: FastAPI = FastAPI(
        title=settings.APP_NAME,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # 요청 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
    app.add_middleware(AxiomLoggingMiddleware, settings=settings, client=axiom_client)

    # CORS 미들웨어 — Cross-Origin Resource Sharing middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """처리되지 않은 예외 — 500, 디버그 모드에서만 원본 메시지 노출.

        Uncaught errors become 500. The raw message is exposed only in DEBUG.
        """
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        detail = str(exc) if settings.DEBUG else "Internal server error"
        return JSONResponse(status_code=500, content={"detail": detail})

    @app.get("/")
    async def root() -> dict[str, str]:
        """서비스 안내 (Service banner)."""
        return {"message": f"{settings.APP_NAME} is running"}

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """서버 상태 확인 엔드포인트.

        Health check endpoint for load balancers and monitoring.
        """
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")
    return app


app: FastAPI = create_app()
