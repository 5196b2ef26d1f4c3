# tests/test_api_tasks.py

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from api.tasks import get_task_service
from core.errors import InputValidationError
from main import app


def create(client: TestClient, headers: dict[str, str], **fields) -> dict:
    res = client.post("/api/tasks", json=fields, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()["data"]


def test_task_lifecycle(client: TestClient, auth_headers) -> None:
    res = client.post(
        "/api/tasks",
        json={"title": "Test Task", "description": "Test Description"},
        headers=auth_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Task created successfully"
    task = body["data"]
    assert task["status"] == "TODO"
    assert task["title"] == "Test Task"
    assert {"id", "description", "createdAt", "updatedAt"} <= set(task)

    res = client.patch(f"/api/tasks/{task['id']}/status", json={"status": "COMPLETED"}, headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["message"] == "Task status updated successfully"

    res = client.get(f"/api/tasks/{task['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "COMPLETED"

    res = client.delete(f"/api/tasks/{task['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Task deleted successfully"}

    res = client.get(f"/api/tasks/{task['id']}", headers=auth_headers)
    assert res.status_code == 404
    assert res.json()["success"] is False
    assert res.json()["error"]["code"] == "TASK_NOT_FOUND"


def test_list_tasks(client: TestClient, auth_headers) -> None:
    create(client, auth_headers, title="One")
    create(client, auth_headers, title="Two")

    res = client.get("/api/tasks", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["success"] is True
    assert {t["title"] for t in res.json()["data"]} == {"One", "Two"}


def test_list_tasks_empty(client: TestClient, auth_headers) -> None:
    res = client.get("/api/tasks", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["data"] == []


def test_other_users_task_is_404(client: TestClient, register) -> None:
    alice = register("alice")
    bob = register("bob")
    task = create(client, alice, title="Alice only")

    for method, path, kwargs in [
        ("GET", f"/api/tasks/{task['id']}", {}),
        ("PUT", f"/api/tasks/{task['id']}", {"json": {"title": "mine now"}}),
        ("PATCH", f"/api/tasks/{task['id']}/status", {"json": {"status": "COMPLETED"}}),
        ("DELETE", f"/api/tasks/{task['id']}", {}),
    ]:
        res = client.request(method, path, headers=bob, **kwargs)
        assert res.status_code == 404, (method, path)
        assert res.json()["error"]["code"] == "TASK_NOT_FOUND"

    assert client.get("/api/tasks", headers=bob).json()["data"] == []
    res = client.get(f"/api/tasks/{task['id']}", headers=alice)
    assert res.json()["data"]["title"] == "Alice only"
    assert res.json()["data"]["status"] == "TODO"


def test_update_task_keeps_status_when_absent(client: TestClient, auth_headers) -> None:
    task = create(client, auth_headers, title="Old", description="d", status="IN_PROGRESS")

    res = client.put(f"/api/tasks/{task['id']}", json={"title": "New"}, headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["message"] == "Task updated successfully"
    data = res.json()["data"]
    assert data["title"] == "New"
    assert data["description"] is None
    assert data["status"] == "IN_PROGRESS"


def test_update_task_replaces_status_when_present(client: TestClient, auth_headers) -> None:
    task = create(client, auth_headers, title="Old")

    res = client.put(
        f"/api/tasks/{task['id']}",
        json={"title": "Old", "status": "COMPLETED"},
        headers=auth_headers,
    )

    assert res.json()["data"]["status"] == "COMPLETED"


def test_create_task_blank_title_is_400(client: TestClient, auth_headers) -> None:
    res = client.post("/api/tasks", json={"title": "   "}, headers=auth_headers)

    assert res.status_code == 400
    assert res.json()["success"] is False
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_task_missing_title_is_400(client: TestClient, auth_headers) -> None:
    res = client.post("/api/tasks", json={"description": "no title"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_status_is_400(client: TestClient, auth_headers) -> None:
    task = create(client, auth_headers, title="T")

    res = client.patch(f"/api/tasks/{task['id']}/status", json={"status": "DONE"}, headers=auth_headers)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_malformed_task_id_is_400(client: TestClient, auth_headers) -> None:
    res = client.get("/api/tasks/not-a-uuid", headers=auth_headers)

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


def test_unknown_task_id_is_404(client: TestClient, auth_headers) -> None:
    res = client.delete(f"/api/tasks/{uuid.uuid4()}", headers=auth_headers)

    assert res.status_code == 404
    assert res.json()["error"]["code"] == "TASK_NOT_FOUND"


def test_stats(client: TestClient, register) -> None:
    alice = register("alice")
    bob = register("bob")
    for status, n in [("TODO", 2), ("IN_PROGRESS", 1), ("COMPLETED", 3)]:
        for i in range(n):
            create(client, alice, title=f"{status} {i}", status=status)
    create(client, bob, title="bob's")

    res = client.get("/api/tasks/stats", headers=alice)

    assert res.status_code == 200
    assert res.json()["data"] == {"todo": 2, "inProgress": 1, "completed": 3, "total": 6}


def test_unexpected_error_is_500_without_detail(client: TestClient, auth_headers) -> None:
    class Broken:
        def list_tasks(self, user_id):
            raise RuntimeError("database password is hunter2")

    app.dependency_overrides[get_task_service] = lambda: Broken()

    res = client.get("/api/tasks", headers=auth_headers)

    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
    }
    assert "hunter2" not in res.text


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    res = client.get("/api/nothing-here")

    assert res.status_code == 404
    assert res.json()["success"] is False
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_validation_error_raised_by_a_service_uses_same_envelope(client: TestClient, auth_headers) -> None:
    class Rejecting:
        def list_tasks(self, user_id):
            raise InputValidationError("title: Title is required")

    app.dependency_overrides[get_task_service] = lambda: Rejecting()

    from_service = client.get("/api/tasks", headers=auth_headers)
    from_body = client.post("/api/tasks", json={"title": " "}, headers=auth_headers)

    assert from_service.status_code == from_body.status_code == 400
    assert from_service.json() == {
        "success": False,
        "error": {"code": "VALIDATION_ERROR", "message": "title: Title is required"},
    }
    assert from_body.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "Title is required" in from_body.json()["error"]["message"]


def test_title_is_returned_as_sent(client: TestClient, auth_headers) -> None:
    task = create(client, auth_headers, title="Title with trailing space ")

    assert task["title"] == "Title with trailing space "
