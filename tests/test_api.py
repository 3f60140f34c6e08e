import pytest
from fastapi.testclient import TestClient

CREATE_ERROR = {"error": "Task field is required and must be a non-empty string"}
UPDATE_ERROR = {"error": "Task field must be a non-empty string"}


def test_root(client):
    """Test the root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_health_check(client):
    """Test the health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "todo-api"
    assert data["todos"] == 2


def test_get_todos_returns_seed_data(client):
    """Test getting all todos"""
    response = client.get("/todos")
    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "task": "Learn Node.js", "completed": False},
        {"id": 2, "task": "Build CRUD API", "completed": False},
    ]


def test_trailing_slash_is_accepted(client):
    response = client.get("/todos/")
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_get_todo_by_id(client):
    """Test getting a specific todo"""
    response = client.get("/todos/2")
    assert response.status_code == 200
    assert response.json() == {"id": 2, "task": "Build CRUD API", "completed": False}


@pytest.mark.parametrize("todo_id", ["999", "abc", "0"])
def test_get_missing_todo(client, todo_id):
    response = client.get(f"/todos/{todo_id}")
    assert response.status_code == 404
    assert response.json() == {"message": "Todo not found"}


def test_create_todo(client, store):
    """Test creating a new todo"""
    response = client.post("/todos", json={"task": "Buy milk"})
    assert response.status_code == 201
    assert response.json() == {"id": 3, "task": "Buy milk", "completed": False}
    assert len(store) == 3


def test_create_completed_todo(client):
    response = client.post("/todos", json={"task": "Already done", "completed": True})
    assert response.status_code == 201
    assert response.json()["completed"] is True


@pytest.mark.parametrize("completed", [1, "true", "yes", None])
def test_create_ignores_truthy_non_boolean_completed(client, completed):
    response = client.post("/todos", json={"task": "Buy milk", "completed": completed})
    assert response.status_code == 201
    assert response.json()["completed"] is False


@pytest.mark.parametrize("body", [{}, {"task": ""}, {"task": "   "}, {"task": 42}, {"task": None}])
def test_create_rejects_invalid_task(client, store, body):
    response = client.post("/todos", json=body)
    assert response.status_code == 400
    assert response.json() == CREATE_ERROR
    assert len(store) == 2


def test_create_without_body(client, store):
    response = client.post("/todos")
    assert response.status_code == 400
    assert response.json() == CREATE_ERROR
    assert len(store) == 2


def test_create_rejects_unknown_fields(client, store):
    response = client.post("/todos", json={"task": "Buy milk", "priority": "high"})
    assert response.status_code == 400
    assert "error" in response.json()
    assert len(store) == 2


def test_create_rejects_malformed_json(client, store):
    response = client.post(
        "/todos",
        content=b'{"task": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert len(store) == 2


def test_ids_keep_growing_after_deletes(client):
    first = client.post("/todos", json={"task": "A"}).json()["id"]
    client.delete(f"/todos/{first}")
    client.delete("/todos/1")
    second = client.post("/todos", json={"task": "B"}).json()["id"]
    assert second > first
    ids = [t["id"] for t in client.get("/todos").json()]
    assert len(ids) == len(set(ids))


def test_mark_todo_completed(client):
    """Test updating a todo"""
    response = client.patch("/todos/1", json={"completed": True})
    assert response.status_code == 200
    assert response.json() == {"id": 1, "task": "Learn Node.js", "completed": True}
    assert client.get("/todos/1").json()["completed"] is True


def test_update_task_text(client):
    response = client.patch("/todos/2", json={"task": "Build REST API"})
    assert response.status_code == 200
    assert response.json() == {"id": 2, "task": "Build REST API", "completed": False}


def test_update_coerces_completed(client):
    assert client.patch("/todos/1", json={"completed": 1}).json()["completed"] is True
    assert client.patch("/todos/1", json={"completed": None}).json()["completed"] is False


def test_update_without_fields_leaves_todo(client):
    assert client.patch("/todos/1", json={}).json() == client.get("/todos/1").json()
    response = client.patch("/todos/1")
    assert response.status_code == 200
    assert response.json()["task"] == "Learn Node.js"


@pytest.mark.parametrize("body", [{"task": ""}, {"task": "  "}, {"task": None}, {"task": 7}])
def test_update_rejects_blank_task(client, body):
    response = client.patch("/todos/1", json=body)
    assert response.status_code == 400
    assert response.json() == UPDATE_ERROR
    assert client.get("/todos/1").json()["task"] == "Learn Node.js"


def test_update_missing_todo(client):
    response = client.patch("/todos/999", json={"completed": True})
    assert response.status_code == 404
    assert response.json() == {"message": "Todo not found"}


def test_delete_todo(client):
    """Test deleting a todo"""
    response = client.delete("/todos/1")
    assert response.status_code == 204
    assert response.content == b""

    # Verify it's gone
    get_response = client.get("/todos/1")
    assert get_response.status_code == 404


def test_delete_missing_todo(client, store):
    response = client.delete("/todos/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}
    assert len(store) == 2


def test_active_and_completed_routes_are_not_ids(client):
    client.patch("/todos/2", json={"completed": True})

    active = client.get("/todos/active")
    completed = client.get("/todos/completed")

    assert active.status_code == 200
    assert completed.status_code == 200
    assert [t["id"] for t in active.json()] == [1]
    assert [t["id"] for t in completed.json()] == [2]


def test_active_and_completed_cover_all(client):
    client.post("/todos", json={"task": "Done", "completed": True})
    client.post("/todos", json={"task": "Open"})
    client.patch("/todos/1", json={"completed": True})
    client.delete("/todos/2")

    everything = {t["id"] for t in client.get("/todos").json()}
    active = {t["id"] for t in client.get("/todos/active").json()}
    completed = {t["id"] for t in client.get("/todos/completed").json()}
    assert active | completed == everything
    assert not active & completed


def test_unexpected_error_returns_500(app, store, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("store exploded")

    monkeypatch.setattr(store, "list", boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/todos")
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong on the server!"}


def test_apps_do_not_share_todos(client, settings):
    from index import create_app

    client.post("/todos", json={"task": "Only here"})
    other = TestClient(create_app(settings))
    assert len(other.get("/todos").json()) == 2


@pytest.mark.parametrize("raw_id", ["1_0", "%EF%BC%91", "%201", "1abc", "+1", "-1"])
def test_non_decimal_ids_are_not_found(client, raw_id):
    for n in range(8):
        client.post("/todos", json={"task": f"Todo {n}"})

    assert client.get(f"/todos/{raw_id}").status_code == 404
    assert client.patch(f"/todos/{raw_id}", json={"completed": True}).status_code == 404
    assert client.delete(f"/todos/{raw_id}").status_code == 404
    assert len(client.get("/todos").json()) == 10


def test_leading_zeros_still_match(client):
    response = client.get("/todos/01")
    assert response.status_code == 200
    assert response.json()["id"] == 1


def test_invalid_update_body_is_rejected_before_lookup(client):
    response = client.patch("/todos/999", json={"task": ""})
    assert response.status_code == 400
    assert response.json() == UPDATE_ERROR


@pytest.mark.parametrize("body", ["x", [1, 2], 5])
def test_update_with_non_object_body(client, body):
    response = client.patch("/todos/1", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Request body is invalid"}
    assert client.get("/todos/1").json()["task"] == "Learn Node.js"


def test_update_rejects_unknown_fields(client):
    response = client.patch("/todos/1", json={"done": True})
    assert response.status_code == 400
    assert response.json() == {"error": "Request body is invalid"}
