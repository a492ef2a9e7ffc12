"""HTTP-level tests for the /todos endpoints."""

from fastapi.testclient import TestClient

from todo_service.config import Settings
from todo_service.main import create_app
from todo_service.models import Task
from todo_service.store import TodoStore

MILK = {"id": 1, "text": "buy milk", "completed": False}


def test_create_list_update_delete_walkthrough(client):
    resp = client.post("/todos", json=MILK)
    assert resp.status_code == 201
    assert resp.content == b""
    assert client.get("/todos").json() == [MILK]

    # same id again is rejected and nothing changes
    resp = client.post("/todos", json=MILK)
    assert resp.status_code == 400
    assert client.get("/todos").json() == [MILK]

    updated = {"id": 1, "text": "buy milk and bread", "completed": True}
    resp = client.put("/todos/1", json=updated)
    assert resp.status_code == 200
    assert resp.content == b""
    assert client.get("/todos").json() == [updated]

    resp = client.put("/todos/99", json={"id": 99, "text": "nope", "completed": False})
    assert resp.status_code == 404
    assert client.get("/todos").json() == [updated]

    resp = client.delete("/todos/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/todos").json() == []

    assert client.delete("/todos/1").status_code == 404


def test_create_appends_in_order(client):
    for i in (5, 2, 9):
        assert client.post("/todos", json={"id": i, "text": f"t{i}", "completed": False}).status_code == 201

    assert [t["id"] for t in client.get("/todos").json()] == [5, 2, 9]


def test_update_keeps_position(client):
    for i in (1, 2, 3):
        client.post("/todos", json={"id": i, "text": f"t{i}", "completed": False})

    client.put("/todos/2", json={"id": 2, "text": "middle", "completed": True})

    assert client.get("/todos").json() == [
        {"id": 1, "text": "t1", "completed": False},
        {"id": 2, "text": "middle", "completed": True},
        {"id": 3, "text": "t3", "completed": False},
    ]


def test_update_rename_collision_is_rejected(client):
    client.post("/todos", json={"id": 1, "text": "a", "completed": False})
    client.post("/todos", json={"id": 2, "text": "b", "completed": False})

    resp = client.put("/todos/1", json={"id": 2, "text": "clash", "completed": False})

    assert resp.status_code == 400
    assert [t["text"] for t in client.get("/todos").json()] == ["a", "b"]


def test_delete_unknown_id(client):
    client.post("/todos", json=MILK)

    assert client.delete("/todos/2").status_code == 404
    assert client.get("/todos").json() == [MILK]


class TestPagination:
    def _seed(self, client, n=6):
        for i in range(n):
            client.post("/todos", json={"id": i, "text": f"t{i}", "completed": False})

    def test_query_parameters(self, client):
        self._seed(client)

        resp = client.get("/todos", params={"offset": 1, "limit": 2})

        assert resp.status_code == 200
        assert [t["id"] for t in resp.json()] == [1, 2]

    def test_json_body_options(self, client):
        self._seed(client)

        resp = client.request("GET", "/todos", json={"offset": 4})

        assert [t["id"] for t in resp.json()] == [4, 5]

    def test_offset_past_end(self, client):
        self._seed(client, 3)

        resp = client.get("/todos", params={"offset": 3})

        assert resp.status_code == 200
        assert resp.json() == []

    def test_malformed_options_fall_back_to_defaults(self, client):
        self._seed(client, 3)

        resp = client.get("/todos", params={"offset": "x", "limit": "-1"})
        assert resp.status_code == 200
        assert len(resp.json()) == 3

        resp = client.request(
            "GET", "/todos", content=b"{broken", headers={"content-type": "application/json"}
        )
        assert resp.status_code == 200
        assert len(resp.json()) == 3

        # deeply nested, still far below the body size limit
        resp = client.request(
            "GET", "/todos", content=b"[" * 5000, headers={"content-type": "application/json"}
        )
        assert resp.status_code == 200
        assert len(resp.json()) == 3


class TestDecodeFailures:
    def test_malformed_json_is_400(self, client):
        resp = client.post(
            "/todos", content=b'{"id": 1, "text":', headers={"content-type": "application/json"}
        )

        assert resp.status_code == 400
        assert "detail" in resp.json()

    def test_missing_body_is_400(self, client):
        assert client.post("/todos").status_code == 400

    def test_wrong_types_are_400(self, client):
        resp = client.post("/todos", json={"id": "1", "text": "x", "completed": "no"})

        assert resp.status_code == 400
        assert client.get("/todos").json() == []

    def test_missing_field_on_update_is_400(self, client):
        client.post("/todos", json=MILK)

        resp = client.put("/todos/1", json={"id": 1, "text": "no flag"})

        assert resp.status_code == 400
        assert client.get("/todos").json() == [MILK]

    def test_non_numeric_path_id_is_400(self, client):
        assert client.delete("/todos/abc").status_code == 400
        assert client.put("/todos/abc", json=MILK).status_code == 400

    def test_out_of_range_id_is_400(self, client):
        resp = client.post("/todos", json={"id": 2**63, "text": "x", "completed": False})

        assert resp.status_code == 400

    def test_service_keeps_serving_after_bad_requests(self, client):
        client.post("/todos", content=b"garbage", headers={"content-type": "application/json"})

        assert client.post("/todos", json=MILK).status_code == 201
        assert client.get("/todos").json() == [MILK]


def test_injected_store_is_shared():
    store = TodoStore([Task(id=7, text="seeded", completed=False)])
    app = create_app(settings=Settings(), store=store)

    with TestClient(app) as client:
        assert client.get("/todos").json() == [{"id": 7, "text": "seeded", "completed": False}]
        client.delete("/todos/7")

    assert app.state.store is store


def test_api_prefix(store):
    app = create_app(settings=Settings(api_prefix="/api"), store=store)

    with TestClient(app) as client:
        assert client.post("/api/todos", json=MILK).status_code == 201
        assert client.get("/api/todos").json() == [MILK]
        assert client.get("/todos").status_code == 404


def test_health_endpoints(client):
    assert client.get("/healthz").status_code == 200

    client.post("/todos", json=MILK)
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": "todo-service", "tasks": 1}
