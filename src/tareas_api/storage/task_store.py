# src/tareas_api/storage/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageError
from .json_store import JsonListStore
from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """JSON-file task store: the whole task list lives in one array file."""

    def __init__(self, path: str | Path = "tareas.json") -> None:
        self._file = JsonListStore(path)
        logger.info("TaskStore ready file=%s", self._file.path)

    def list_tasks(self) -> list[Task]:
        try:
            return [Task.from_dict(r) for r in self._file.read_all()]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed task record in %s: %s", self._file.path, e)
            raise StorageError() from e

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        self._file.write_all([t.to_dict() for t in tasks])
