"""고객 계정 서비스 — 회원가입, 로그인, 프로필 조회 비즈니스 로직.

User (customer) Account Service — Business logic for signup, login and
profile retrieval. Mirrors the provider credential flow: bcrypt
hash-and-compare, then a signed JWT on success.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from workshopfinder.config import Settings
from workshopfinder.models.user import User
from workshopfinder.repositories.user_repository import user_repository
from workshopfinder.schemas.auth import LoginRequest
from workshopfinder.schemas.user import (
    UserEnvelope,
    UserLoginResponse,
    UserRegisterRequest,
    UserResponse,
)
from workshopfinder.utils.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from workshopfinder.utils.jwt import create_access_token
from workshopfinder.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)

CUSTOMER_ROLE: str = "customer"


class UserService:
    """고객 계정 관련 비즈니스 로직을 처리하는 서비스.

    Service handling customer account business logic.
    """

    def to_response(self, user: User) -> UserResponse:
        """고객 모델을 응답 스키마로 변환합니다 (비밀번호 제외).

        Convert a User model instance to a UserResponse schema, dropping the hash.
        """
        return UserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    async def register(
        self,
        db: AsyncSession,
        data: UserRegisterRequest,
    ) -> UserEnvelope:
        """고객 회원가입을 처리합니다.

        Register a new customer account.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Signup request data)

        Returns:
            UserEnvelope: 생성된 고객 응답 (Created customer response)

        Raises:
            DuplicateError: 같은 이메일의 고객이 이미 존재할 때
                            (When a customer with this email already exists)
        """
        if await user_repository.get_by_email(db, data.email) is not None:
            raise DuplicateError("User already exists with this email")

        try:
            user: User = await user_repository.create(
                db,
                {
                    "name": data.name,
                    "email": data.email,
                    "password_hash": hash_password(data.password),
                    "role": CUSTOMER_ROLE,
                },
            )
        except IntegrityError:
            # 동시 가입 경합 — A concurrent signup won the unique index
            await db.rollback()
            raise DuplicateError("User already exists with this email")

        logger.info("Customer registered: %s", user.id)
        return UserEnvelope(message="User registered successfully!", user=self.to_response(user))

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
        settings: Settings,
    ) -> UserLoginResponse:
        """고객 로그인을 처리합니다.

        Authenticate a customer and issue an access token.

        Raises:
            NotFoundError: 이메일이 없을 때 (Unknown email)
            UnauthorizedError: 비밀번호 불일치 (Password mismatch)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None:
            raise NotFoundError("User not found")

        if not verify_password(data.password, user.password_hash):
            logger.warning("Customer login failed: bad password for %s", user.id)
            raise UnauthorizedError("Invalid credentials")

        return UserLoginResponse(
            message="Login successful",
            user=self.to_response(user),
            token=create_access_token(user.id, CUSTOMER_ROLE, settings),
        )

    async def get_me(self, db: AsyncSession, user_id: UUID) -> UserResponse:
        """인증된 고객의 프로필을 반환합니다 (Return the authenticated customer's profile)."""
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise UnauthorizedError("Account no longer exists")
        return self.to_response(user)


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
