# app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")
API_URL = f"{FASTAPI_URL}/api"

TIMEOUT = 10


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def _unwrap(res):
    """
    Returns the envelope's data on success, or {"error": message} otherwise.
    """
    try:
        body = res.json()
    except ValueError:
        return {"error": f"오류 발생: {res.status_code}"}

    if res.ok and body.get("success"):
        return body.get("data", {})

    error = body.get("error") or {}
    return {"error": error.get("message") or f"오류 발생: {res.status_code}", "code": error.get("code")}


def _request(method, path, token=None, **kwargs):
    headers = _auth_headers(token) if token else {}
    try:
        res = requests.request(method, f"{API_URL}{path}", headers=headers, timeout=TIMEOUT, **kwargs)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _unwrap(res)


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(username, password):
    """
    Registers a new user. Returns {"token", "username"} on success.
    """
    return _request("POST", "/auth/register", json={"username": username, "password": password})


def login_user(username, password):
    """
    Logs in a user. Returns {"token", "username"} on success.
    """
    return _request("POST", "/auth/login", json={"username": username, "password": password})


# -------------------------
# Task Management
# -------------------------

def list_tasks(token):
    """
    Lists the user's tasks, newest first.
    """
    return _request("GET", "/tasks", token)


def get_task(token, task_id):
    return _request("GET", f"/tasks/{task_id}", token)


def create_task(token, title, description=None, status=None):
    payload = {"title": title, "description": description}
    if status:
        payload["status"] = status
    return _request("POST", "/tasks", token, json=payload)


def update_task(token, task_id, title, description=None, status=None):
    """
    Replaces title and description; status is only sent when given.
    """
    payload = {"title": title, "description": description}
    if status:
        payload["status"] = status
    return _request("PUT", f"/tasks/{task_id}", token, json=payload)


def update_task_status(token, task_id, status):
    return _request("PATCH", f"/tasks/{task_id}/status", token, json={"status": status})


def delete_task(token, task_id):
    """
    Deletes a task. Returns {} on success.
    """
    return _request("DELETE", f"/tasks/{task_id}", token)


def get_task_stats(token):
    """
    Returns {"todo", "inProgress", "completed", "total"}.
    """
    return _request("GET", "/tasks/stats", token)
