"""FastAPI 의존성 주입 모듈 — 설정 및 토큰 인증.

FastAPI dependency injection module — Settings access and bearer-token
authentication.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT 서명/만료를 검증 (decode_token verifies signature and expiry)
    4. 토큰의 role이 요구되는 계정 종류와 일치하는지 확인
       (Token role must match the required account kind)
"""

from typing import Annotated, Awaitable, Callable
from uuid import UUID

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from workshopfinder.config import Settings
from workshopfinder.schemas.auth import TokenClaims
from workshopfinder.utils.exceptions import UnauthorizedError
from workshopfinder.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
security: HTTPBearer = HTTPBearer()


def get_settings(request: Request) -> Settings:
    """실행 중인 앱의 설정을 반환합니다 (Settings of the running application)."""
    return request.app.state.settings


async def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """Bearer 토큰을 검증하고 클레임을 반환합니다.

    Verify the bearer token and return its claims.

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료됨 (Invalid or expired token)
    """
    try:
        payload: dict = decode_token(credentials.credentials, settings)
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid token")

    if payload.get("type") != "access" or "sub" not in payload or "role" not in payload:
        raise UnauthorizedError("Invalid token")
    return TokenClaims(sub=payload["sub"], role=payload["role"])


def require_account(role: str) -> Callable[..., Awaitable[UUID]]:
    """계정 종류 검사 의존성 팩토리.

    Dependency factory returning the authenticated account id when the
    token was issued to an account of the given kind.

    Args:
        role: 요구되는 계정 종류 ("customer" 또는 "provider")

    Returns:
        FastAPI 의존성 함수 — 계정 UUID 반환 또는 401 발생
    """
    async def _check(
        claims: Annotated[TokenClaims, Depends(get_token_claims)],
    ) -> UUID:
        if claims.role != role:
            raise UnauthorizedError("Token was not issued for this account type")
        try:
            return UUID(claims.sub)
        except ValueError:
            raise UnauthorizedError("Invalid token")
    return _check


# 편의 의존성 — Pre-configured account dependencies
require_customer = require_account("customer")
require_provider = require_account("provider")
