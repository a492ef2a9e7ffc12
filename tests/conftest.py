"""
Pytest configuration and fixtures for the todo service.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure project src is importable when running tests standalone
repo_root = Path(__file__).resolve().parents[1]
src_path = repo_root / "src"
if src_path.exists() and str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from todo_service.config import Settings  # noqa: E402
from todo_service.main import create_app  # noqa: E402
from todo_service.models import Task  # noqa: E402
from todo_service.store import TodoStore  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(api_prefix="", max_body_bytes=16 * 1024, cors_allow_origins=["*"])


@pytest.fixture
def store() -> TodoStore:
    return TodoStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_task():
    def _make(task_id: int, text: str | None = None, completed: bool = False) -> Task:
        return Task(id=task_id, text=text if text is not None else f"task {task_id}", completed=completed)

    return _make
