"""REST API endpoint tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from reverse_snake.server.app import create_app

BASE = "http://test"


@pytest.fixture()
async def app():
    application = create_app()
    yield application
    await application.state.game_manager.cleanup()


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


class TestCreateGame:
    @pytest.mark.asyncio
    async def test_create_default(self, client):
        resp = await client.post("/games", json={})
        assert resp.status_code == 201
        data = resp.json()
        assert data["status"] == "running"
        assert data["score"] == 0
        assert data["board_size"] == 15
        assert data["tick_rate_ms"] == 150
        assert "game_id" in data

    @pytest.mark.asyncio
    async def test_create_custom_config(self, client):
        resp = await client.post("/games", json={
            "board_size": 20, "tick_rate_ms": 100, "seed": 3,
        })
        assert resp.status_code == 201
        data = resp.json()
        assert data["board_size"] == 20
        assert data["tick_rate_ms"] == 100

    @pytest.mark.asyncio
    async def test_create_board_too_small(self, client):
        resp = await client.post("/games", json={"board_size": 3})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_create_invalid_probability(self, client):
        resp = await client.post("/games", json={"reverse_probability": 2})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_session_cap(self):
        capped = create_app(max_sessions=1)
        transport = ASGITransport(app=capped)
        async with AsyncClient(transport=transport, base_url=BASE) as c:
            assert (await c.post("/games", json={})).status_code == 201
            resp = await c.post("/games", json={})
        assert resp.status_code == 422
        assert "Too many" in resp.json()["detail"]
        await capped.state.game_manager.cleanup()


class TestListGames:
    @pytest.mark.asyncio
    async def test_list_empty(self, client):
        resp = await client.get("/games")
        assert resp.status_code == 200
        assert resp.json() == []

    @pytest.mark.asyncio
    async def test_list_after_create(self, client):
        await client.post("/games", json={})
        resp = await client.get("/games")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 1
        assert data[0]["connections"] == 0


class TestGetGame:
    @pytest.mark.asyncio
    async def test_get_existing(self, client):
        create_resp = await client.post("/games", json={"seed": 1})
        game_id = create_resp.json()["game_id"]
        resp = await client.get(f"/games/{game_id}")
        assert resp.status_code == 200
        data = resp.json()
        assert data["game_id"] == game_id
        assert data["state"]["score"] == 0
        assert len(data["state"]["board"]) == 15

    @pytest.mark.asyncio
    async def test_get_not_found(self, client):
        resp = await client.get("/games/nonexistent")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Game not found."}


class TestDeleteGame:
    @pytest.mark.asyncio
    async def test_delete_existing(self, client):
        create_resp = await client.post("/games", json={})
        game_id = create_resp.json()["game_id"]
        resp = await client.delete(f"/games/{game_id}")
        assert resp.status_code == 204
        assert (await client.get(f"/games/{game_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_not_found(self, client):
        resp = await client.delete("/games/nonexistent")
        assert resp.status_code == 404


class TestAppFactory:
    def test_registry_created_eagerly(self):
        application = create_app(max_sessions=3)
        assert application.state.game_manager.list_sessions() == []

    def test_invalid_session_cap(self):
        with pytest.raises(ValueError, match="at least 1"):
            create_app(max_sessions=0)

    @pytest.mark.asyncio
    async def test_error_schema_documented(self, client):
        resp = await client.get("/openapi.json")
        assert resp.status_code == 200
        paths = resp.json()["paths"]
        for path, method, code in [
            ("/games/{game_id}", "get", "404"),
            ("/games/{game_id}", "delete", "404"),
        ]:
            schema = paths[path][method]["responses"][code]["content"]["application/json"]["schema"]
            assert schema["$ref"].endswith("/ErrorResponse")
