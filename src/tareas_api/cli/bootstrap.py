# src/tareas_api/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data directory exists,
- wires the JSON-file stores and the auth service into AppState.
"""

from __future__ import annotations

import logging

from ..auth.service import AuthService
from ..config import get_settings
from ..core.state import AppState
from ..storage.task_store import TaskStore
from ..storage.user_store import UserStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.users_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises ConfigError when no token signing secret is configured.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        user_store=UserStore(settings.users_path),
        auth=AuthService.from_settings(settings),
    )
