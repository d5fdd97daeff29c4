# src/tareas_api/storage/user_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageError
from .json_store import JsonListStore
from .models import User

logger = logging.getLogger(__name__)


class UserStore:
    """JSON-file credential store. Records hold a password hash, never the password."""

    def __init__(self, path: str | Path = "usuarios.json") -> None:
        self._file = JsonListStore(path)
        logger.info("UserStore ready file=%s", self._file.path)

    def list_users(self) -> list[User]:
        try:
            return [User.from_dict(r) for r in self._file.read_all()]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed user record in %s: %s", self._file.path, e)
            raise StorageError() from e

    def save_users(self, users: Iterable[User]) -> None:
        self._file.write_all([u.to_dict() for u in users])

    def find_by_username(self, username: str) -> User | None:
        for user in self.list_users():
            if user.username == username:
                return user
        return None
