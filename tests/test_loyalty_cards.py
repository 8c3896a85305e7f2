# tests/test_loyalty_cards.py
import uuid

from httpx import AsyncClient

from app.models.loyalty_card import LoyaltyCard


async def test_create_card_with_defaults(client: AsyncClient, business_id: str, customer_id: str):
    response = await client.post("/api/loyalty_cards", json={"customer_id": customer_id, "business_id": business_id})

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    card = data["card"]
    assert card["id"]
    assert card["customer_id"] == customer_id
    assert card["points_balance"] == 0
    assert card["tier"] == "standard"
    assert card["is_active"] is True
    assert card["card_number"].startswith("CARD-")


async def test_create_card_coerces_points_balance(client: AsyncClient, business_id: str, customer_id: str):
    response = await client.post("/api/loyalty_cards", json={
        "customer_id": customer_id,
        "business_id": business_id,
        "points_balance": "25",
        "tier": None,
    })

    assert response.status_code == 201
    assert response.json()["card"]["points_balance"] == 25
    assert response.json()["card"]["tier"] == "standard"


async def test_create_card_rejects_negative_balance(client: AsyncClient, business_id: str, customer_id: str, db_session):
    response = await client.post("/api/loyalty_cards", json={
        "customer_id": customer_id,
        "business_id": business_id,
        "points_balance": -5,
    })

    assert response.status_code == 400
    assert db_session.query(LoyaltyCard).count() == 0


async def test_duplicate_card_returns_409_with_existing_card(client: AsyncClient, business_id: str, customer_id: str, db_session):
    payload = {"customer_id": customer_id, "business_id": business_id}

    first = await client.post("/api/loyalty_cards", json=payload)
    second = await client.post("/api/loyalty_cards", json=payload)

    assert first.status_code == 201
    assert second.status_code == 409
    data = second.json()
    assert data["success"] is False
    assert data["message"] == "A loyalty card already exists for this customer and business"
    assert data["card"]["id"] == first.json()["card"]["id"]
    assert db_session.query(LoyaltyCard).count() == 1


async def test_create_card_reports_every_missing_field(client: AsyncClient, sql_statements: list):
    response = await client.post("/api/loyalty_cards", json={})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Customer ID is required", "Business ID is required"]
    assert not any(s.lstrip().upper().startswith("INSERT") for s in sql_statements)


async def test_list_cards_requires_a_filter(client: AsyncClient, sql_statements: list):
    response = await client.get("/api/loyalty_cards")

    assert response.status_code == 400
    assert response.json()["message"] == "Either customer_id or business_id is required"
    assert sql_statements == []


async def test_list_cards_by_customer_and_by_business(client: AsyncClient, business_id: str, customer_id: str):
    other_business = str(uuid.uuid4())
    other_customer = str(uuid.uuid4())
    await client.post("/api/loyalty_cards", json={"customer_id": customer_id, "business_id": business_id})
    await client.post("/api/loyalty_cards", json={"customer_id": customer_id, "business_id": other_business})
    await client.post("/api/loyalty_cards", json={"customer_id": other_customer, "business_id": business_id})

    by_customer = await client.get("/api/loyalty_cards", params={"customer_id": customer_id})
    by_business = await client.get("/api/loyalty_cards", params={"business_id": business_id})

    assert by_customer.status_code == 200
    assert {c["business_id"] for c in by_customer.json()["cards"]} == {business_id, other_business}
    assert {c["customer_id"] for c in by_business.json()["cards"]} == {customer_id, other_customer}
