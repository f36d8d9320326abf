"""고객 계정 API 테스트.

Customer account API tests — Signup, login and the bearer-protected /me endpoint.
"""

from datetime import datetime, timedelta, timezone

import jwt
from httpx import AsyncClient

from tests.conftest import TEST_PASSWORD, auth_header, make_token

URL = "/api/users"


class TestUserRegister:
    """고객 회원가입 테스트."""

    async def test_register_user(self, client: AsyncClient):
        """회원가입 성공 — 비밀번호 미포함."""
        res = await client.post(f"{URL}/register", json={
            "name": "Bob",
            "email": "bob@example.com",
            "password": "pw123456",
        })
        assert res.status_code == 201
        data = res.json()
        assert data["message"] == "User registered successfully!"
        assert data["user"]["email"] == "bob@example.com"
        assert data["user"]["role"] == "customer"
        assert "createdAt" in data["user"]
        assert "password" not in data["user"]
        assert "passwordHash" not in data["user"]

    async def test_register_duplicate_email(self, client: AsyncClient, customer):
        """중복 이메일 가입 시 400."""
        res = await client.post(f"{URL}/register", json={
            "name": "Other Alice",
            "email": customer.email,
            "password": "pw123456",
        })
        assert res.status_code == 400
        assert res.json()["detail"] == "User already exists with this email"

    async def test_register_invalid_email(self, client: AsyncClient):
        """잘못된 이메일 형식 시 422."""
        res = await client.post(f"{URL}/register", json={
            "name": "Bob",
            "email": "not-an-email",
            "password": "pw123456",
        })
        assert res.status_code == 422

    async def test_register_missing_field(self, client: AsyncClient):
        """필수 필드 누락 시 422."""
        res = await client.post(f"{URL}/register", json={"email": "bob@example.com"})
        assert res.status_code == 422

    async def test_register_multibyte_long_password(self, client: AsyncClient):
        """멀티바이트 문자로 72바이트를 넘는 비밀번호로 가입 후 로그인."""
        password = "é" * 40
        res = await client.post(f"{URL}/register", json={
            "name": "Bob",
            "email": "bob@example.com",
            "password": password,
        })
        assert res.status_code == 201

        res = await client.post(f"{URL}/login", json={"email": "bob@example.com", "password": password})
        assert res.status_code == 200


class TestUserLogin:
    """고객 로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, customer, settings):
        """로그인 성공 — 검증 가능한 토큰 발급."""
        res = await client.post(f"{URL}/login", json={
            "email": customer.email,
            "password": TEST_PASSWORD,
        })
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "Login successful"
        assert data["tokenType"] == "bearer"
        assert "password" not in data["user"]

        claims = jwt.decode(data["token"], settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        assert claims["sub"] == str(customer.id)
        assert claims["role"] == "customer"

    async def test_login_wrong_password(self, client: AsyncClient, customer):
        """잘못된 비밀번호 시 401."""
        res = await client.post(f"{URL}/login", json={
            "email": customer.email,
            "password": "wrong",
        })
        assert res.status_code == 401
        assert res.json()["detail"] == "Invalid credentials"

    async def test_login_unknown_email(self, client: AsyncClient):
        """존재하지 않는 이메일 시 404."""
        res = await client.post(f"{URL}/login", json={
            "email": "ghost@example.com",
            "password": "whatever",
        })
        assert res.status_code == 404


class TestUserMe:
    """현재 고객 조회 테스트."""

    async def test_me(self, client: AsyncClient, customer, settings):
        """토큰으로 내 정보 조회."""
        token = make_token(customer, "customer", settings)
        res = await client.get(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 200
        assert res.json()["id"] == str(customer.id)

    async def test_me_no_auth(self, client: AsyncClient):
        """인증 헤더 없이 조회 시 거부."""
        res = await client.get(f"{URL}/me")
        assert res.status_code in (401, 403)

    async def test_me_with_provider_token(self, client: AsyncClient, provider, settings):
        """제공자 토큰으로 고객 엔드포인트 접근 시 401."""
        token = make_token(provider, "provider", settings)
        res = await client.get(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 401

    async def test_me_expired_token(self, client: AsyncClient, customer, settings):
        """만료된 토큰 시 401."""
        token = jwt.encode(
            {
                "sub": str(customer.id),
                "role": "customer",
                "type": "access",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 401
        assert res.json()["detail"] == "Token has expired"

    async def test_me_forged_token(self, client: AsyncClient, customer):
        """다른 키로 서명된 토큰 시 401."""
        token = jwt.encode(
            {"sub": str(customer.id), "role": "customer", "type": "access"},
            "some-other-signing-key-of-sufficient-length",
            algorithm="HS256",
        )
        res = await client.get(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 401
