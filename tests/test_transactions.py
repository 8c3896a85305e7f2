# tests/test_transactions.py
import uuid

from httpx import AsyncClient

from app.models.loyalty_card import LoyaltyCard
from app.models.transaction import Transaction


async def record(client: AsyncClient, business_id: str, customer_id: str, **overrides):
    payload = {"businessId": business_id, "customerId": customer_id, "amount": 12.5, **overrides}
    return await client.post("/api/transactions", json=payload)


async def test_purchase_credits_existing_card(client: AsyncClient, business_id: str, customer_id: str):
    await client.post("/api/loyalty_cards", json={"customer_id": customer_id, "business_id": business_id, "points_balance": 5})

    response = await record(client, business_id, customer_id, pointsEarned=10, type="purchase")

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Transaction created successfully"
    assert data["transactionId"]
    assert data["card"]["points_balance"] == 15


async def test_first_purchase_opens_card(client: AsyncClient, business_id: str, customer_id: str, db_session):
    response = await record(client, business_id, customer_id, pointsEarned=7)

    assert response.status_code == 201
    card = response.json()["card"]
    assert card["points_balance"] == 7
    assert card["card_number"].startswith("CARD-")
    assert db_session.query(LoyaltyCard).count() == 1


async def test_refund_never_goes_below_zero(client: AsyncClient, business_id: str, customer_id: str):
    await record(client, business_id, customer_id, pointsEarned=10)

    response = await record(client, business_id, customer_id, type="refund", pointsEarned=4)
    assert response.json()["card"]["points_balance"] == 6

    response = await record(client, business_id, customer_id, type="refund", pointsEarned=50)
    assert response.status_code == 201
    assert response.json()["card"]["points_balance"] == 0


async def test_reward_redemption_is_only_recorded(client: AsyncClient, business_id: str, customer_id: str):
    await record(client, business_id, customer_id, pointsEarned=10)

    response = await record(client, business_id, customer_id, type="reward_redemption", pointsEarned=3)

    assert response.status_code == 201
    assert response.json()["card"]["points_balance"] == 10


async def test_invalid_type_is_rejected_without_writes(client: AsyncClient, business_id: str, customer_id: str, db_session):
    response = await record(client, business_id, customer_id, type="gift", pointsEarned=10)

    assert response.status_code == 400
    assert response.json()["message"].startswith("Type is invalid")
    assert db_session.query(Transaction).count() == 0
    assert db_session.query(LoyaltyCard).count() == 0


async def test_required_fields(client: AsyncClient):
    response = await client.post("/api/transactions", json={})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Business ID is required", "Customer ID is required", "Amount is required"]


async def test_unknown_program_returns_404(client: AsyncClient, business_id: str, customer_id: str, db_session):
    response = await record(client, business_id, customer_id, programId=str(uuid.uuid4()), pointsEarned=5)

    assert response.status_code == 404
    assert response.json()["message"] == "Loyalty program not found"
    assert db_session.query(Transaction).count() == 0


async def test_failed_balance_update_rolls_back_the_record(client: AsyncClient, business_id: str, customer_id: str, db_session, mocker):
    mocker.patch("app.crud.loyalty_card.add_points", side_effect=RuntimeError("card update failed"))

    response = await record(client, business_id, customer_id, pointsEarned=5)

    assert response.status_code == 500
    # запись об операции и начисление - одна транзакция БД
    assert db_session.query(Transaction).count() == 0


async def test_list_transactions_with_pagination(client: AsyncClient, business_id: str, customer_id: str):
    program = await client.post("/api/programs", json={"businessId": business_id, "name": "Coffee Club", "type": "points"})
    program_id = program.json()["programId"]
    for amount in (10, 30, 20):
        await record(client, business_id, customer_id, amount=amount, programId=program_id)
    await record(client, business_id, str(uuid.uuid4()), amount=99)
    await record(client, str(uuid.uuid4()), customer_id, amount=1)

    response = await client.get("/api/transactions", params={
        "businessId": business_id,
        "customerId": customer_id,
        "sortBy": "amount",
        "sortDirection": "asc",
        "limit": 2,
    })

    assert response.status_code == 200
    data = response.json()
    assert [t["amount"] for t in data["transactions"]] == [10, 20]
    assert data["total"] == 3
    assert data["page"] == {"limit": 2, "offset": 0, "total": 3}
    assert data["transactions"][0]["program_name"] == "Coffee Club"

    response = await client.get("/api/transactions", params={"businessId": business_id, "type": "refund"})
    assert response.json()["transactions"] == []
    assert response.json()["total"] == 0


async def test_list_transactions_requires_business_id(client: AsyncClient, sql_statements: list):
    response = await client.get("/api/transactions")

    assert response.status_code == 400
    assert response.json()["message"] == "Business ID is required as a query parameter"
    assert sql_statements == []


async def test_get_and_delete_transaction(client: AsyncClient, business_id: str, customer_id: str):
    created = await record(client, business_id, customer_id, pointsEarned=5, receiptNumber="R-001", notes="Latte")
    transaction_id = created.json()["transactionId"]

    response = await client.get(f"/api/transactions/{transaction_id}")
    assert response.status_code == 200
    transaction = response.json()["transaction"]
    assert transaction["receipt_number"] == "R-001"
    assert transaction["points_earned"] == 5
    assert transaction["type"] == "purchase"

    response = await client.delete(f"/api/transactions/{transaction_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Transaction deleted successfully"}

    response = await client.get(f"/api/transactions/{transaction_id}")
    assert response.status_code == 404
    assert response.json()["message"] == "Transaction not found"

    response = await client.delete(f"/api/transactions/{transaction_id}")
    assert response.status_code == 404
