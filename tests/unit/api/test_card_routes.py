"""Unit tests for board and card routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from s3kanban import __version__
from s3kanban.api.app import create_app
from s3kanban.api.dependencies import get_board_service
from s3kanban.board_service import BoardService
from s3kanban.board_store import (
    Board,
    BoardStore,
    CardStatus,
    MemoryBackend,
    StorageUnavailableError,
)
from s3kanban.repositioning import column


class UnavailableBackend:
    """Backend that behaves like an unreachable bucket."""

    def get(self, key: str) -> bytes | None:
        raise StorageUnavailableError("Connect timeout on endpoint URL")

    def put(self, key: str, data: bytes) -> None:
        raise StorageUnavailableError("Connect timeout on endpoint URL")

    def check(self) -> None:
        raise StorageUnavailableError("Connect timeout on endpoint URL")


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> BoardStore:
    return BoardStore(backend)


@pytest.fixture
def app(store: BoardStore) -> FastAPI:
    """Create a test FastAPI app with the service dependency overridden."""
    app = create_app(store=store)
    service = BoardService(store)

    def override_get_board_service():
        yield service

    app.dependency_overrides[get_board_service] = override_get_board_service
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def _create(client: TestClient, title: str, status: str = "ToDo") -> dict:
    response = client.post("/api/card", json={"title": title, "description": "", "status": status})
    assert response.status_code == 200
    return response.json()


@pytest.mark.unit
class TestGetBoard:
    """Tests for GET /api/board."""

    def test_empty_board(self, client: TestClient) -> None:
        response = client.get("/api/board")

        assert response.status_code == 200
        assert response.json() == {"cards": []}

    def test_returns_cards(self, client: TestClient) -> None:
        created = _create(client, "First")

        response = client.get("/api/board")

        assert response.json() == {"cards": [created]}

    def test_store_unavailable(self, store: BoardStore, client: TestClient) -> None:
        store.backend = UnavailableBackend()

        response = client.get("/api/board")

        assert response.status_code == 500
        assert response.json() == {"data": None, "error": "Storage unavailable"}

    def test_store_corrupt(self, backend: MemoryBackend, client: TestClient) -> None:
        backend.blobs["board.json"] = b"<html>"

        response = client.get("/api/board")

        assert response.status_code == 500
        assert response.json()["error"] == "Stored board is corrupt"


@pytest.mark.unit
class TestHealth:
    """Tests for GET /api/health."""

    def test_health_does_not_touch_store(self, store: BoardStore, client: TestClient) -> None:
        store.backend = UnavailableBackend()

        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_app_reports_package_version(self, store: BoardStore) -> None:
        assert create_app(store=store).version == __version__


@pytest.mark.unit
class TestCreateCard:
    """Tests for POST /api/card."""

    def test_create_card(self, client: TestClient) -> None:
        response = client.post(
            "/api/card",
            json={"title": "Write tests", "description": "all of them", "status": "Doing"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"]
        assert data["title"] == "Write tests"
        assert data["description"] == "all of them"
        assert data["status"] == "Doing"
        assert data["position"] == 0

    def test_client_id_and_position_ignored(self, client: TestClient) -> None:
        _create(client, "First")

        response = client.post(
            "/api/card",
            json={
                "id": "mine",
                "title": "Second",
                "description": "",
                "status": "ToDo",
                "position": 0,
            },
        )

        data = response.json()
        assert data["id"] != "mine"
        assert data["position"] == 1

    def test_appends_per_column(self, client: TestClient) -> None:
        assert _create(client, "a", "ToDo")["position"] == 0
        assert _create(client, "b", "ToDo")["position"] == 1
        assert _create(client, "c", "Hold")["position"] == 0

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "x"},
            {"title": "x", "status": "Backlog"},
            {"title": ["x"], "status": "ToDo"},
            {"title": "x", "status": "ToDo", "position": True},
            {"title": "x", "status": "ToDo", "position": "3"},
        ],
    )
    def test_invalid_body(self, client: TestClient, body: dict) -> None:
        response = client.post("/api/card", json=body)

        assert response.status_code == 400
        assert response.json() == {"data": None, "error": "Invalid request body"}

    def test_malformed_json(self, client: TestClient) -> None:
        response = client.post(
            "/api/card", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400

    def test_store_unavailable(self, store: BoardStore, client: TestClient) -> None:
        store.backend = UnavailableBackend()

        response = client.post("/api/card", json={"title": "x", "status": "ToDo"})

        assert response.status_code == 500


@pytest.mark.unit
class TestUpdateCard:
    """Tests for PUT /api/card/{id}."""

    def test_update_card(self, client: TestClient, store: BoardStore) -> None:
        card = _create(client, "Old")

        response = client.put(
            f"/api/card/{card['id']}",
            json={"title": "New", "description": "desc", "status": "Done", "position": 0},
        )

        assert response.status_code == 204
        assert response.content == b""
        saved = store.load().get_card(card["id"])
        assert saved is not None
        assert saved.title == "New"
        assert saved.description == "desc"
        assert saved.status == CardStatus.DONE

    def test_negative_position_is_clamped(self, client: TestClient, store: BoardStore) -> None:
        a = _create(client, "A")
        b = _create(client, "B")

        response = client.put(
            f"/api/card/{b['id']}",
            json={"title": "B", "description": "", "status": "ToDo", "position": -5},
        )

        assert response.status_code == 204
        order = [c.id for c in column(store.load().cards, CardStatus.TODO)]
        assert order == [b["id"], a["id"]]

    def test_unknown_card(self, client: TestClient, backend: MemoryBackend) -> None:
        _create(client, "A")
        before = backend.blobs["board.json"]

        response = client.put(
            "/api/card/missing",
            json={"title": "x", "description": "", "status": "ToDo", "position": 0},
        )

        assert response.status_code == 404
        assert response.json() == {"data": None, "error": "Card not found"}
        assert backend.blobs["board.json"] == before

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "x", "description": "", "status": "ToDo"},
            {"title": "x", "description": "", "status": "Nope", "position": 0},
            {"title": "x", "description": "", "status": "ToDo", "position": "first"},
            {"title": "x", "description": "", "status": "ToDo", "position": True},
            {"title": "x", "description": "", "status": "ToDo", "position": "3"},
            {"title": "x", "description": "", "status": "ToDo", "position": 2.5},
        ],
    )
    def test_invalid_body(self, client: TestClient, body: dict) -> None:
        card = _create(client, "A")

        response = client.put(f"/api/card/{card['id']}", json=body)

        assert response.status_code == 400

    def test_store_unavailable(self, store: BoardStore, client: TestClient) -> None:
        store.backend = UnavailableBackend()

        response = client.put(
            "/api/card/any",
            json={"title": "x", "description": "", "status": "ToDo", "position": 0},
        )

        assert response.status_code == 500


@pytest.mark.unit
class TestDeleteCard:
    """Tests for DELETE /api/card/{id}."""

    def test_delete_card(self, client: TestClient, store: BoardStore) -> None:
        card = _create(client, "A")

        response = client.delete(f"/api/card/{card['id']}")

        assert response.status_code == 204
        assert store.load() == Board(cards=[])

    def test_unknown_card(self, client: TestClient, backend: MemoryBackend) -> None:
        _create(client, "A")
        before = backend.blobs["board.json"]

        response = client.delete("/api/card/missing")

        assert response.status_code == 404
        assert backend.blobs["board.json"] == before

    def test_store_corrupt(self, backend: MemoryBackend, client: TestClient) -> None:
        backend.blobs["board.json"] = b'{"cards": "nope"}'

        response = client.delete("/api/card/any")

        assert response.status_code == 500
