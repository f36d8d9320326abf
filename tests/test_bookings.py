"""예약 API 테스트.

Booking API tests — Creation, per-party listings and the status lifecycle.
"""

import uuid

from httpx import AsyncClient
from sqlalchemy import func, select

from tests.conftest import add_provider, add_user, client_for, make_settings
from workshopfinder.main import create_app
from workshopfinder.models import Booking

URL = "/api/bookings"


def booking_payload(user_id, provider_id, **overrides) -> dict:
    payload = {
        "userId": str(user_id),
        "providerId": str(provider_id),
        "date": "2024-06-01T10:00:00Z",
        "vehicleType": "Sedan",
        "issueDescription": "Engine rattles at idle",
        "contactPhone": "555-0199",
    }
    payload.update(overrides)
    return payload


async def booking_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(Booking))).scalar()


class TestBookingCreate:
    """예약 생성 테스트."""

    async def test_create_booking(self, client: AsyncClient, customer, provider):
        """예약 생성 성공 — pending 상태."""
        res = await client.post(URL, json=booking_payload(customer.id, provider.id, note="Morning please"))
        assert res.status_code == 201
        data = res.json()
        assert data["status"] == "pending"
        assert data["userId"] == str(customer.id)
        assert data["providerId"] == str(provider.id)
        assert data["vehicleType"] == "Sedan"
        assert data["note"] == "Morning please"

    async def test_supplied_status_ignored(self, client: AsyncClient, customer, provider):
        """요청에 status가 있어도 pending으로 생성."""
        res = await client.post(URL, json=booking_payload(customer.id, provider.id, status="completed"))
        assert res.status_code == 201
        assert res.json()["status"] == "pending"

    async def test_date_only_is_midnight(self, client: AsyncClient, customer, provider):
        """날짜만 주면 자정으로 저장."""
        res = await client.post(URL, json=booking_payload(customer.id, provider.id, date="2024-06-01"))
        assert res.status_code == 201
        assert res.json()["date"].startswith("2024-06-01T00:00:00")

    async def test_unknown_provider(self, client: AsyncClient, customer, db):
        """존재하지 않는 제공자 시 404, 저장 안 됨."""
        res = await client.post(URL, json=booking_payload(customer.id, uuid.uuid4()))
        assert res.status_code == 404
        assert res.json()["detail"] == "User or Provider not found"
        assert await booking_count(db) == 0

    async def test_unknown_user(self, client: AsyncClient, provider, db):
        """존재하지 않는 고객 시 404, 저장 안 됨."""
        res = await client.post(URL, json=booking_payload(uuid.uuid4(), provider.id))
        assert res.status_code == 404
        assert await booking_count(db) == 0

    async def test_malformed_ids(self, client: AsyncClient):
        """잘못된 ID 형식 시 422."""
        res = await client.post(URL, json=booking_payload("abc", "def"))
        assert res.status_code == 422

    async def test_missing_field(self, client: AsyncClient, customer, provider):
        """필수 필드 누락 시 422."""
        payload = booking_payload(customer.id, provider.id)
        del payload["contactPhone"]
        res = await client.post(URL, json=payload)
        assert res.status_code == 422

    async def test_double_booking_allowed(self, client: AsyncClient, customer, provider, db):
        """같은 제공자/시간 중복 예약 허용."""
        for _ in range(2):
            res = await client.post(URL, json=booking_payload(customer.id, provider.id))
            assert res.status_code == 201
        assert await booking_count(db) == 2


class TestBookingLists:
    """예약 목록 테스트."""

    async def test_user_bookings_embed_provider(self, client: AsyncClient, booking, provider):
        """고객 예약 목록 — 제공자 정보 포함, 비밀번호 제외."""
        res = await client.get(f"{URL}/user/{booking.user_id}")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["id"] == str(booking.id)
        assert data[0]["provider"]["name"] == provider.name
        assert "password" not in data[0]["provider"]
        assert "passwordHash" not in data[0]["provider"]

    async def test_provider_bookings_embed_user(self, client: AsyncClient, booking, customer):
        """제공자 예약 목록 — 고객 정보 포함."""
        res = await client.get(f"{URL}/provider/{booking.provider_id}")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["user"]["email"] == customer.email
        assert "passwordHash" not in data[0]["user"]

    async def test_lists_are_scoped(self, client: AsyncClient, booking, db):
        """다른 고객/제공자의 예약은 포함되지 않음."""
        other_user = await add_user(db, email="other@example.com")
        other_provider = await add_provider(db, email="other@garage.com")
        assert (await client.get(f"{URL}/user/{other_user.id}")).json() == []
        assert (await client.get(f"{URL}/provider/{other_provider.id}")).json() == []

    async def test_unknown_party_empty_list(self, client: AsyncClient):
        """존재하지 않는 ID는 빈 목록."""
        res = await client.get(f"{URL}/user/{uuid.uuid4()}")
        assert res.status_code == 200
        assert res.json() == []

    async def test_deleted_provider_is_null(self, client: AsyncClient, booking):
        """제공자 삭제 후에도 예약은 남고 provider는 null."""
        res = await client.delete(f"/api/providers/{booking.provider_id}")
        assert res.status_code == 200

        res = await client.get(f"{URL}/user/{booking.user_id}")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["provider"] is None


class TestBookingStatus:
    """예약 상태 변경 테스트."""

    async def test_accept_then_complete(self, client: AsyncClient, booking):
        """pending → accepted → completed."""
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "accepted"})
        assert res.status_code == 200
        assert res.json()["status"] == "accepted"

        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "completed"})
        assert res.status_code == 200
        assert res.json()["status"] == "completed"

    async def test_reject(self, client: AsyncClient, booking):
        """pending → rejected."""
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "rejected"})
        assert res.status_code == 200
        assert res.json()["status"] == "rejected"

    async def test_illegal_transition(self, client: AsyncClient, booking, db):
        """pending → completed 는 400, 상태 유지."""
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "completed"})
        assert res.status_code == 400
        assert "Invalid status transition" in res.json()["detail"]

        await db.refresh(booking)
        assert booking.status == "pending"

    async def test_terminal_state_is_final(self, client: AsyncClient, booking):
        """rejected 이후 변경 불가."""
        await client.put(f"{URL}/{booking.id}/status", json={"status": "rejected"})
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "accepted"})
        assert res.status_code == 400

    async def test_back_to_pending_rejected(self, client: AsyncClient, booking):
        """pending으로 되돌리기 불가."""
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "pending"})
        assert res.status_code == 400

    async def test_unknown_status_value(self, client: AsyncClient, booking, db):
        """enum 외 값은 422, 상태 유지."""
        res = await client.put(f"{URL}/{booking.id}/status", json={"status": "teleported"})
        assert res.status_code == 422

        await db.refresh(booking)
        assert booking.status == "pending"

    async def test_missing_status(self, client: AsyncClient, booking):
        """status 누락 시 422."""
        res = await client.put(f"{URL}/{booking.id}/status", json={})
        assert res.status_code == 422

    async def test_nonexistent_booking(self, client: AsyncClient):
        """존재하지 않는 예약 시 404."""
        res = await client.put(f"{URL}/{uuid.uuid4()}/status", json={"status": "accepted"})
        assert res.status_code == 404
        assert res.json()["detail"] == "Booking not found"

    async def test_lenient_mode_overwrites(self, database, database_url, booking):
        """전이 검증 해제 시 enum 값이면 무조건 덮어쓰기."""
        app = create_app(make_settings(database_url, BOOKING_ENFORCE_TRANSITIONS=False), database)
        async with client_for(app) as client:
            res = await client.put(f"{URL}/{booking.id}/status", json={"status": "completed"})
            assert res.status_code == 200
            assert res.json()["status"] == "completed"

            res = await client.put(f"{URL}/{booking.id}/status", json={"status": "pending"})
            assert res.status_code == 200
            assert res.json()["status"] == "pending"


class TestBookingScenario:
    """제공자 등록부터 예약 수락까지 전체 흐름."""

    async def test_register_book_accept(self, client: AsyncClient, customer):
        """등록 → 예약 → 수락 → 제공자 목록에 반영."""
        res = await client.post("/api/providers/register", json={
            "name": "Joe's Garage",
            "email": "joe@x.com",
            "phone": "555",
            "serviceType": "Mechanic Services",
            "location": "Downtown",
            "password": "pw",
        })
        assert res.status_code == 201
        provider = res.json()["provider"]
        assert provider["availability"] is True
        assert provider["approved"] is True

        res = await client.post(URL, json=booking_payload(customer.id, provider["id"]))
        assert res.status_code == 201
        booking = res.json()
        assert booking["status"] == "pending"

        res = await client.put(f"{URL}/{booking['id']}/status", json={"status": "accepted"})
        assert res.status_code == 200

        res = await client.get(f"{URL}/provider/{provider['id']}")
        data = res.json()
        assert len(data) == 1
        assert data[0]["status"] == "accepted"
        assert data[0]["user"]["id"] == str(customer.id)
