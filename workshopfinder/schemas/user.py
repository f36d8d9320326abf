"""고객 계정 Pydantic 요청/응답 스키마 정의.

Customer account Pydantic request/response schema definitions.
Password hashes never appear in any response schema.
"""

from datetime import datetime

from pydantic import EmailStr, Field

from workshopfinder.schemas.common import CamelModel


class UserRegisterRequest(CamelModel):
    """고객 회원가입 요청 스키마.

    Customer signup request schema.

    Attributes:
        name: 이름 (Display name)
        email: 이메일 (Login email, unique among customers)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
    """

    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class UserResponse(CamelModel):
    """고객 응답 스키마 — 비밀번호 제외.

    Customer response schema (password excluded).
    """

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime


class UserEnvelope(CamelModel):
    """메시지 + 고객 응답 (Message plus customer payload)."""

    message: str
    user: UserResponse


class UserLoginResponse(UserEnvelope):
    """고객 로그인 응답 — 액세스 토큰 포함 (Customer login response with access token)."""

    token: str
    token_type: str = "bearer"
