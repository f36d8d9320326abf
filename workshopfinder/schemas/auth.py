"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic schemas shared by customer and provider login.
"""

from pydantic import EmailStr

from workshopfinder.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """이메일/비밀번호 로그인 요청 스키마.

    Email + password login request schema, used by both account kinds.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    email: EmailStr
    password: str  # 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)


class TokenClaims(CamelModel):
    """디코딩된 액세스 토큰 클레임 (Decoded access token claims)."""

    sub: str  # 계정 UUID 문자열 (Account UUID)
    role: str  # "customer" 또는 "provider"
