from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from config import load_settings
from conftest import FRONTEND_ORIGIN
from dependencies import parse_task_id
from main import create_app


def test_cors_preflight_allows_frontend(client):
    response = client.options(
        "/api/tasks",
        headers={
            "Origin": FRONTEND_ORIGIN,
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == FRONTEND_ORIGIN
    allowed = response.headers["access-control-allow-methods"]
    for method in ("GET", "POST", "PUT", "DELETE"):
        assert method in allowed


def test_cors_rejects_other_origins(client):
    response = client.get("/api/tasks", headers={"Origin": "http://evil.example"})

    assert "access-control-allow-origin" not in response.headers


def test_openapi_document(client):
    response = client.get("/api-docs/openapi.json")

    assert response.status_code == 200
    document = response.json()
    assert document["info"]["title"] == "Task API"
    assert "/api/tasks" in document["paths"]
    assert "/api/tasks/{task_id}" in document["paths"]


def test_swagger_ui(client):
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "swagger" in response.text.lower()


def test_index_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Task Board" in response.text


def test_startup_creates_tasks_file(tmp_path, settings):
    path = tmp_path / "fresh" / "tasks.json"
    app = create_app(settings=replace(settings, tasks_file=path))

    with TestClient(app) as client:
        assert path.exists()
        assert client.get("/api/tasks").json() == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1), ("42", 42), (" 7", 7), ("12abc", 12), ("+3", 3),
        ("abc", None), ("", None), ("-", None), ("\u0661", None), ("3\u0662", 3),
    ],
)
def test_parse_task_id(raw, expected):
    assert parse_task_id(raw) == expected


def test_load_settings_defaults(monkeypatch):
    for name in ("TASKS_FILE", "FRONTEND_ORIGIN", "API_HOST", "API_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("config.load_dotenv", lambda: False)

    settings = load_settings()

    assert str(settings.tasks_file) == "tasks.json"
    assert settings.frontend_origin == "http://localhost:5173"
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.setenv("TASKS_FILE", "/tmp/board.json")
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert str(settings.tasks_file) == "/tmp/board.json"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_load_settings_rejects_bad_port(monkeypatch, port):
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.setenv("API_PORT", port)

    with pytest.raises(ValueError, match="API_PORT"):
        load_settings()
