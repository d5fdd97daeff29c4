# src/tareas_api/storage/json_store.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class JsonListStore:
    """
    One collection persisted as a single JSON array file.

    Every call re-reads or fully rewrites the file; nothing is cached
    between calls and no file handle outlives a call.

    Concurrency:
    - read-modify-write cycles of callers are NOT atomic (last writer wins)
    - a single write is: data goes to a sibling .tmp file, then os.replace
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def read_all(self) -> list[dict[str, Any]]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read %s: %s", self._path, e)
            raise StorageError() from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Corrupt JSON in %s: %s", self._path, e)
            raise StorageError() from e

        if not isinstance(data, list) or not all(isinstance(x, dict) for x in data):
            logger.error("Unexpected JSON shape in %s (expected an array of objects)", self._path)
            raise StorageError()

        logger.debug("Loaded %d records from %s", len(data), self._path)
        return data

    def write_all(self, items: list[dict[str, Any]]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except (OSError, UnicodeError) as e:
            tmp.unlink(missing_ok=True)
            logger.error("Cannot write %s: %s", self._path, e)
            raise StorageError() from e
        logger.debug("Saved %d records to %s", len(items), self._path)
