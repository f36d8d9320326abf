"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.
Login endpoints for both account kinds issue the same kind of token.

JWT Payload Structure:
    {
        "sub": "account_uuid",          # 계정 ID (Customer or provider identifier)
        "role": "customer"|"provider",  # 계정 종류 (Account kind)
        "exp": 1234567890,              # 만료 시간 UNIX timestamp (Expiration)
        "type": "access"                # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import jwt

from workshopfinder.config import Settings


def create_access_token(account_id: UUID, role: str, settings: Settings) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a signed, expiring JWT access token for an account.
    Token expires after JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        account_id: 계정 UUID (Customer or provider UUID)
        role: 계정 종류 (Account kind, "customer" or "provider")
        settings: 서명 키/알고리즘을 담은 설정 (Settings with signing key/algorithm)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    # 만료 시간 설정 — 현재 UTC 시간 + 설정된 분 수 (Set expiration from current UTC + configured minutes)
    expire: datetime = datetime.now(timezone.utc) + timedelta(
        minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload: dict[str, Any] = {
        "sub": str(account_id),
        "role": role,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
