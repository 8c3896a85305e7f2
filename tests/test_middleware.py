# tests/test_middleware.py
import uuid

from httpx import AsyncClient


async def test_preflight_is_answered_without_handler(client: AsyncClient, sql_statements: list):
    response = await client.options("/api/programs")

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Credentials"] == "true"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"
    assert "Content-Type" in response.headers["Access-Control-Allow-Headers"]
    assert sql_statements == []


async def test_allowed_methods_follow_the_resource(client: AsyncClient):
    program = await client.options(f"/api/programs/{uuid.uuid4()}")
    codes = await client.options("/api/redemption_codes")
    settings = await client.options("/api/settings")

    assert program.headers["Access-Control-Allow-Methods"] == "GET,PUT,DELETE,OPTIONS"
    assert codes.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,OPTIONS"
    assert settings.headers["Access-Control-Allow-Methods"] == "GET,POST,DELETE,OPTIONS"


async def test_cors_headers_on_regular_response(client: AsyncClient):
    response = await client.get("/api/comments")

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET,POST,OPTIONS"


async def test_unsupported_method_returns_405(client: AsyncClient):
    response = await client.patch("/api/rewards", json={})

    assert response.status_code == 405
    assert response.json() == {"success": False, "message": "Method PATCH not allowed"}


async def test_unknown_path_returns_404(client: AsyncClient):
    response = await client.get("/api/unknown")

    assert response.status_code == 404
    assert response.json()["success"] is False


async def test_preflight_for_every_resource(client: AsyncClient):
    expected = {
        "/api/comments": "GET,POST,OPTIONS",
        "/api/health": "GET,OPTIONS",
        "/api/rewards": "GET,POST,OPTIONS",
        "/api/loyalty_cards": "GET,POST,OPTIONS",
        "/api/qr_codes": "GET,POST,OPTIONS",
        "/api/transactions": "GET,POST,OPTIONS",
        f"/api/transactions/{uuid.uuid4()}": "GET,DELETE,OPTIONS",
    }
    for path, methods in expected.items():
        response = await client.options(path)
        assert response.status_code == 200, path
        assert response.content == b""
        assert response.headers["Access-Control-Allow-Methods"] == methods, path
