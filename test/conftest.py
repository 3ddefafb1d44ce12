import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from storage import TaskStore

INITIAL_TASKS = [
    {"id": 1, "title": "Task 1", "description": "Description 1"},
    {"id": 2, "title": "Task 2", "description": "Description 2"},
]

FRONTEND_ORIGIN = "http://localhost:5173"


@pytest.fixture
def tasks_file(tmp_path) -> Path:
    """
    A tasks file seeded with two tasks, recreated for every test so
    no test sees another one's writes.
    """
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps(INITIAL_TASKS), encoding="utf-8")
    return path


@pytest.fixture
def store(tasks_file) -> TaskStore:
    return TaskStore(tasks_file)


@pytest.fixture
def settings(tasks_file) -> Settings:
    return Settings(
        tasks_file=tasks_file,
        frontend_origin=FRONTEND_ORIGIN,
        host="127.0.0.1",
        port=3000,
        log_level="INFO",
    )


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
