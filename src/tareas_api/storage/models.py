# src/tareas_api/storage/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    id: int
    titulo: str
    descripcion: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "titulo": self.titulo, "descripcion": self.descripcion}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        return cls(
            id=int(raw["id"]),
            titulo=raw.get("titulo"),
            descripcion=raw.get("descripcion"),
        )


@dataclass(slots=True)
class User:
    id: int
    username: str
    password_hash: str

    def to_dict(self) -> dict[str, Any]:
        # On-disk key stays camelCase to match files written by earlier versions.
        return {"id": self.id, "username": self.username, "passwordHash": self.password_hash}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> User:
        return cls(
            id=int(raw["id"]),
            username=str(raw["username"]),
            password_hash=str(raw.get("passwordHash") or ""),
        )


def next_id(items: list[Task] | list[User]) -> int:
    """Next free id: highest existing id + 1, or 1 for an empty collection."""
    return max((item.id for item in items), default=0) + 1
