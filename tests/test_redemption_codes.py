# tests/test_redemption_codes.py
import uuid

import pytest
from httpx import AsyncClient

from app.models.redemption_code import RedemptionCode


@pytest.fixture
async def reward_id(client: AsyncClient, business_id: str) -> str:
    response = await client.post("/api/rewards", json={
        "name": "Free Coffee",
        "description": "Any size",
        "points_required": 10,
        "business_id": business_id,
    })
    return response.json()["reward"]["id"]


async def test_create_code_generates_value(client: AsyncClient, reward_id: str, customer_id: str):
    response = await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": customer_id})

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Redemption code created successfully"
    code = data["redemption_code"]
    assert len(code["code"]) == 8
    assert code["code"] == code["code"].upper()
    assert code["redeemed"] is False
    assert code["reward_name"] == "Free Coffee"
    assert code["points_required"] == 10


async def test_create_code_uses_client_value(client: AsyncClient, reward_id: str, customer_id: str):
    response = await client.post("/api/redemption_codes", json={
        "reward_id": reward_id,
        "customer_id": customer_id,
        "code": "WELCOME10",
    })

    assert response.status_code == 201
    assert response.json()["redemption_code"]["code"] == "WELCOME10"

    # тот же код второй раз выпустить нельзя
    response = await client.post("/api/redemption_codes", json={
        "reward_id": reward_id,
        "customer_id": customer_id,
        "code": "WELCOME10",
    })
    assert response.status_code == 409
    assert response.json()["message"] == "Redemption code already exists"


async def test_generated_code_collision_is_retried(client: AsyncClient, reward_id: str, customer_id: str, mocker, db_session):
    mocker.patch(
        "app.services.redemption.generate_redemption_code",
        side_effect=["AAAA1111", "AAAA1111", "BBBB2222"],
    )

    first = await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": customer_id})
    second = await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": customer_id})

    assert first.json()["redemption_code"]["code"] == "AAAA1111"
    assert second.status_code == 201
    assert second.json()["redemption_code"]["code"] == "BBBB2222"
    assert db_session.query(RedemptionCode).count() == 2


async def test_create_code_for_unknown_reward_returns_404(client: AsyncClient, customer_id: str):
    response = await client.post("/api/redemption_codes", json={"reward_id": str(uuid.uuid4()), "customer_id": customer_id})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Reward not found"}


async def test_redeem_code_only_once(client: AsyncClient, reward_id: str, customer_id: str):
    created = await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": customer_id})
    code = created.json()["redemption_code"]["code"]

    response = await client.put("/api/redemption_codes", json={"code": code})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Redemption code redeemed successfully"
    assert data["redemption_code"]["redeemed"] is True
    assert data["redemption_code"]["redeemed_at"] is not None

    response = await client.put("/api/redemption_codes", json={"code": code})
    assert response.status_code == 409
    assert response.json()["message"] == "Redemption code has already been redeemed"


async def test_redeem_unknown_code_returns_404(client: AsyncClient):
    response = await client.put("/api/redemption_codes", json={"code": "NOPE0000"})

    assert response.status_code == 404
    assert response.json()["message"] == "Redemption code not found"


async def test_list_codes_requires_filter(client: AsyncClient, sql_statements: list):
    response = await client.get("/api/redemption_codes")

    assert response.status_code == 400
    assert response.json()["message"].startswith("At least one filter parameter is required")
    assert sql_statements == []


async def test_list_codes_by_filters(client: AsyncClient, reward_id: str, customer_id: str):
    for _ in range(2):
        await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": customer_id})
    await client.post("/api/redemption_codes", json={"reward_id": reward_id, "customer_id": str(uuid.uuid4())})

    response = await client.get("/api/redemption_codes", params={"customer_id": customer_id})
    codes = response.json()["redemption_codes"]
    assert len(codes) == 2
    assert all(c["reward_name"] == "Free Coffee" for c in codes)
    assert all(c["reward_description"] == "Any size" for c in codes)

    await client.put("/api/redemption_codes", json={"code": codes[0]["code"]})

    response = await client.get("/api/redemption_codes", params={"customer_id": customer_id, "redeemed": "false"})
    assert [c["code"] for c in response.json()["redemption_codes"]] == [codes[1]["code"]]

    response = await client.get("/api/redemption_codes", params={"reward_id": reward_id})
    assert len(response.json()["redemption_codes"]) == 3


async def test_expired_code_cannot_be_redeemed(client: AsyncClient, reward_id: str, customer_id: str, db_session):
    created = await client.post("/api/redemption_codes", json={
        "reward_id": reward_id,
        "customer_id": customer_id,
        "code": "OLD2020",
        "expires_at": "2020-01-01T00:00:00Z",
    })
    assert created.status_code == 201
    assert created.json()["redemption_code"]["status"] == "expired"

    response = await client.put("/api/redemption_codes", json={"code": "OLD2020"})

    assert response.status_code == 409
    assert response.json()["message"] == "Redemption code has expired"
    code = db_session.query(RedemptionCode).filter_by(code="OLD2020").one()
    assert code.redeemed is False
    assert code.redeemed_at is None


async def test_code_with_future_expiry_is_redeemed(client: AsyncClient, reward_id: str, customer_id: str):
    created = await client.post("/api/redemption_codes", json={
        "reward_id": reward_id,
        "customer_id": customer_id,
        "expires_at": "2999-01-01T00:00:00",
    })
    assert created.json()["redemption_code"]["status"] == "active"
    code = created.json()["redemption_code"]["code"]

    response = await client.put("/api/redemption_codes", json={"code": code})

    assert response.status_code == 200
    assert response.json()["redemption_code"]["status"] == "redeemed"
