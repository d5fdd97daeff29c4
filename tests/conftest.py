# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from tareas_api.api.app import create_app
from tareas_api.auth.service import AuthService
from tareas_api.cli.bootstrap import create_initial_state
from tareas_api.core.state import AppState

from fakes import SECRET, InMemoryTaskRepo, InMemoryUserRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tareas-api-test",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tareas.json",
        users_path=tmp_path / "usuarios.json",
        jwt_secret=SECRET,
        jwt_algorithm="HS256",
        token_ttl_seconds=3600,
        # bcrypt minimum; keeps the suite fast
        bcrypt_rounds=4,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with the real JSON-file stores under tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def client(state: AppState) -> TestClient:
    return TestClient(create_app(state))


@pytest.fixture()
def memory_state(settings: SimpleNamespace) -> AppState:
    """AppState wired with in-memory repos (no files touched)."""
    return AppState(
        settings=settings,
        task_store=InMemoryTaskRepo(),
        user_store=InMemoryUserRepo(),
        auth=AuthService(SECRET, bcrypt_rounds=4),
    )


@pytest.fixture()
def memory_client(memory_state: AppState) -> TestClient:
    return TestClient(create_app(memory_state))


def login_headers(client: TestClient, username: str = "alice", password: str = "pw1") -> dict[str, str]:
    client.post("/register", json={"username": username, "password": password})
    resp = client.post("/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    return login_headers(client)


@pytest.fixture()
def memory_auth_headers(memory_client: TestClient) -> dict[str, str]:
    return login_headers(memory_client)
