# src/tareas_api/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ports import TaskRepo, UserRepo

if TYPE_CHECKING:
    from ..auth.service import AuthService


@dataclass
class AppState:
    # Settings are kept on the state so handlers never read global config.
    settings: object

    task_store: TaskRepo
    user_store: UserRepo
    auth: AuthService
