"""API 요청 로깅 미들웨어 — 로컬 로거 + Axiom.

API request logging middleware.
Every request is summarized on the ``workshopfinder.access`` logger and,
when Axiom credentials are configured, shipped to Axiom as a structured
event. Logs: endpoint, method, data (body/params), status code, error reason.
Sensitive fields (password, token, secret) are masked before they leave the process.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from workshopfinder.config import Settings

logger: logging.Logger = logging.getLogger("workshopfinder.access")

# 마스킹 대상 필드 패턴 — 부분 일치, apiKey·accessToken·passwordHash 등 포함
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_?key|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def _truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 — Truncate large values to prevent oversized logs."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _error_detail(body: bytes) -> str:
    """오류 응답 본문에서 사유 추출 (Pull the error reason out of a JSON error body)."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]

    detail = data.get("detail", data) if isinstance(data, dict) else data
    if not isinstance(detail, str):
        detail = json.dumps(detail, default=str)
    if len(detail) > 500:
        detail = detail[:500] + "..."
    return detail


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Middleware that logs all API requests and responses.
    Captures: method, path, query params, request body, status code, error detail.

    Args:
        app: 하위 ASGI 앱 (Wrapped ASGI app)
        settings: 애플리케이션 설정 — Axiom 토큰/데이터셋 (Axiom token and dataset)
        client: 이미 생성된 Axiom 클라이언트, 테스트에서 주입 (Pre-built client, injected by tests)
    """

    def __init__(self, app: Any, settings: Settings, client: Any | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: Any | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵 — Skip excluded paths
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()

        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        # Request body 읽기 — Read request body (only for methods with body)
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    request_body = _truncate(mask_sensitive(json.loads(body_bytes)))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 다시 감싸서 반환
            # Error responses: read the body for the reason, then re-wrap it
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)

            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if query_params:
                log_event["query_params"] = mask_sensitive(query_params)
            if request_body is not None:
                log_event["request_body"] = request_body
            if error_detail:
                log_event["error"] = error_detail

            level = logging.WARNING if status_code >= 400 else logging.INFO
            logger.log(level, "%s %s -> %s (%.2fms)", method, path, status_code, duration_ms)
            self._ship(log_event)

        return response

    def _ship(self, event: dict[str, Any]) -> None:
        """Axiom 전송 — 실패해도 요청 처리에는 영향 없음.

        Send the event to Axiom. Delivery failures are logged, never raised.
        """
        if self._client is None:
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.warning("Axiom ingest failed", exc_info=True)
