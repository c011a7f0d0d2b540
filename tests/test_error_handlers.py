from datetime import timedelta

from flask_jwt_extended import create_access_token

from backend.app import create_app
from backend.config import TestingConfig
from backend.utils.errors import ExternalServiceError, ForbiddenError


class AuthRequiredConfig(TestingConfig):
    AUTH_REQUIRED = True


def test_unknown_route_returns_json_404(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.get_json() == {
        "error": "Not Found",
        "message": "Route GET:/nowhere not found",
        "statusCode": 404,
    }


def test_method_not_allowed_keeps_envelope(client):
    resp = client.patch("/tasks")
    assert resp.status_code == 405
    assert resp.get_json()["statusCode"] == 405


def test_unexpected_error_is_hidden_from_client(app, client, monkeypatch):
    service = app.extensions["task_service"]

    def boom(user_id=None):
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(service, "list_tasks", boom)
    resp = client.get("/tasks")
    assert resp.status_code == 500
    body = resp.get_json()
    assert body == {"error": "Internal Server Error", "message": "Something went wrong", "statusCode": 500}
    assert "hunter2" not in resp.get_data(as_text=True)


def test_api_errors_use_their_status_and_class_name(app, client, monkeypatch):
    service = app.extensions["task_service"]

    def forbidden(task_id):
        raise ForbiddenError("not yours")

    monkeypatch.setattr(service, "get_task", forbidden)
    resp = client.get("/tasks/1")
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "ForbiddenError", "message": "not yours", "statusCode": 403}


def test_external_service_error_message():
    err = ExternalServiceError("JSONPlaceholder", "timed out")
    assert err.message == "JSONPlaceholder service error: timed out"
    assert err.status_code == 502


# --- authentication ---

def test_auth_required_rejects_missing_token():
    app = create_app(AuthRequiredConfig)
    resp = app.test_client().get("/tasks")
    assert resp.status_code == 401
    body = resp.get_json()
    assert body["error"] == "UnauthorizedError"
    assert body["statusCode"] == 401


def test_auth_required_accepts_valid_token():
    app = create_app(AuthRequiredConfig)
    with app.app_context():
        token = create_access_token(identity="7")
    client = app.test_client()
    headers = {"Authorization": f"Bearer {token}"}
    created = client.post("/tasks", json={"title": "t"}, headers=headers)
    assert created.status_code == 201
    assert created.get_json()["task"]["userId"] == "7"


def test_invalid_token_is_rejected_even_when_auth_optional(client):
    resp = client.get("/tasks", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Invalid token"


def test_expired_token_is_rejected(app, client):
    with app.app_context():
        token = create_access_token(identity="7", expires_delta=timedelta(seconds=-1))
    resp = client.get("/tasks", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.get_json()["message"] == "Token has expired"
