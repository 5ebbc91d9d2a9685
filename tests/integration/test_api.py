import pytest
import uvicorn
from fastapi.testclient import TestClient

from forge.api.main import create_app, run
from forge.errors import ConfigError
from forge.task import api


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


def _create(client, **payload) -> dict:
    response = client.post("/api/tasks", json={"title": "Task", **payload})
    assert response.status_code == 200, response.text
    return response.json()


def test_dashboard_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "FORGE" in response.text
    assert "/api/tasks" in response.text


def test_create_and_list(client, store):
    created = _create(client, title="  Fix bug ", priority="high", tags="a, b")

    assert created["title"] == "Fix bug"
    assert created["priority"] == "high"
    assert created["tags"] == ["a", "b"]
    assert created["creator"] == "@web-user"
    assert created["status"] == "open"

    listed = client.get("/api/tasks").json()
    assert [t["id"] for t in listed] == [created["id"]]
    assert api.get_task(store, created["id"]).title == "Fix bug"


def test_create_coerces_priority_and_tags(client):
    created = _create(client, priority="urgent", tags=["x", 1, " y "], creator="@bot")

    assert created["priority"] == "medium"
    assert created["tags"] == ["x", "y"]
    assert created["creator"] == "@bot"


def test_create_accepts_form_body(client):
    response = client.post("/api/tasks", data={"title": "From form", "priority": "low"})

    assert response.status_code == 200
    assert response.json()["priority"] == "low"


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": 12}, {"title": "x" * 501}])
def test_create_rejects_bad_title(client, store, payload):
    response = client.post("/api/tasks", json=payload)

    assert response.status_code == 400
    assert "Title" in response.json()["detail"]
    assert api.list_tasks(store) == []


def test_create_rejects_unparseable_body(client):
    response = client.post(
        "/api/tasks", content=b"not json", headers={"content-type": "application/json"}
    )

    assert response.status_code == 400


def test_lifecycle_endpoints(client):
    task = _create(client)

    claimed = client.post(f"/api/tasks/{task['id']}/claim", json={"agent": "@bot"})
    assert claimed.status_code == 200
    assert claimed.json()["assignee"] == "@bot"

    again = client.post(f"/api/tasks/{task['id']}/claim", json={})
    assert again.status_code == 409

    done = client.post(f"/api/tasks/{task['id']}/complete", json={"proof": "PR#1"})
    assert done.status_code == 200
    assert done.json()["proof"] == "PR#1"
    assert done.json()["completedAt"] == done.json()["updatedAt"]

    released = client.post(f"/api/tasks/{task['id']}/unclaim")
    assert released.status_code == 409
    assert "completed" in released.json()["detail"]


def test_claim_defaults_to_web_user_and_unclaim(client):
    task = _create(client)

    claimed = client.post(f"/api/tasks/{task['id']}/claim")
    assert claimed.json()["assignee"] == "@web-user"

    released = client.post(f"/api/tasks/{task['id']}/unclaim")
    assert released.status_code == 200
    assert released.json()["status"] == "open"
    assert released.json()["assignee"] is None


@pytest.mark.parametrize("action", ["claim", "complete", "unclaim"])
def test_unknown_task_is_404(client, action):
    response = client.post(f"/api/tasks/missing/{action}")

    assert response.status_code == 404


def test_get_task_and_status_filter(client):
    first = _create(client, title="one")
    second = _create(client, title="two")
    client.post(f"/api/tasks/{second['id']}/claim")

    assert client.get(f"/api/tasks/{first['id']}").json()["title"] == "one"
    assert client.get("/api/tasks/missing").status_code == 404

    claimed = client.get("/api/tasks", params={"status": "claimed"}).json()
    assert [t["id"] for t in claimed] == [second["id"]]
    assert client.get("/api/tasks", params={"status": "bogus"}).status_code == 422


def test_claim_and_complete_accept_form_bodies(client):
    """Contract: claim/complete read agent and proof from form posts like create does."""
    task = _create(client)

    claimed = client.post(f"/api/tasks/{task['id']}/claim", data={"agent": "@bot"})
    assert claimed.status_code == 200
    assert claimed.json()["assignee"] == "@bot"

    done = client.post(f"/api/tasks/{task['id']}/complete", data={"proof": "PR#2"})
    assert done.status_code == 200
    assert done.json()["proof"] == "PR#2"


def test_blank_or_odd_bodies_fall_back(client):
    task = _create(client)

    claimed = client.post(f"/api/tasks/{task['id']}/claim", json={"agent": ""})
    assert claimed.json()["assignee"] == "@web-user"

    done = client.post(f"/api/tasks/{task['id']}/complete", json={"proof": 42})
    assert done.status_code == 200
    assert "proof" not in done.json()


def test_run_serves_loopback_and_announces(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    run("127.0.0.1", 3131)

    assert calls == [{"host": "127.0.0.1", "port": 3131, "access_log": False}]
    assert "Forge Web UI running at http://127.0.0.1:3131" in capsys.readouterr().err


def test_run_refuses_public_host(monkeypatch):
    """Boundary: the unauthenticated API never binds beyond loopback."""
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    with pytest.raises(ConfigError):
        run("0.0.0.0", 3030)
    assert calls == []
