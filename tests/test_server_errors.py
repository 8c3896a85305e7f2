# tests/test_server_errors.py
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.main import create_app


def database_down(*args, **kwargs):
    raise OperationalError("SELECT rewards", {}, Exception("server closed the connection unexpectedly"))


@pytest.fixture
async def dev_client(settings, database):
    """Клиент приложения, собранного с ENVIRONMENT=development."""
    app = create_app(settings=settings.model_copy(update={"ENVIRONMENT": "development"}), database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


async def test_database_error_hides_details_outside_development(client: AsyncClient, business_id: str, mocker):
    mocker.patch("app.crud.reward.get_rewards_by_business", side_effect=database_down)

    response = await client.get("/api/rewards", params={"business_id": business_id})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"


async def test_database_error_details_in_development(dev_client: AsyncClient, business_id: str, mocker):
    mocker.patch("app.crud.reward.get_rewards_by_business", side_effect=database_down)

    response = await dev_client.get("/api/rewards", params={"business_id": business_id})

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Internal server error"
    assert "server closed the connection unexpectedly" in data["error"]


async def test_unexpected_error_keeps_cors_headers(client: AsyncClient, mocker):
    mocker.patch("app.crud.comment.get_comments", side_effect=RuntimeError("boom"))

    response = await client.get("/api/comments")

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"
