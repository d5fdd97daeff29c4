# src/tareas_api/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the HTTP handlers and the auth service.

Handlers depend on Protocols instead of the JSON-file stores, so tests
can swap in in-memory repos without touching any handler.
"""

from collections.abc import Iterable
from typing import Protocol

from ..storage.models import Task, User


class TaskRepo(Protocol):
    def list_tasks(self) -> list[Task]: ...
    def save_tasks(self, tasks: Iterable[Task]) -> None: ...


class UserRepo(Protocol):
    def list_users(self) -> list[User]: ...
    def save_users(self, users: Iterable[User]) -> None: ...
    def find_by_username(self, username: str) -> User | None: ...
