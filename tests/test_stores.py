# tests/test_stores.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tareas_api.core.errors import StorageError
from tareas_api.storage.json_store import JsonListStore
from tareas_api.storage.models import Task, User, next_id
from tareas_api.storage.task_store import TaskStore
from tareas_api.storage.user_store import UserStore


def test_missing_and_empty_files_read_as_empty_list(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "tareas.json")
    assert store.list_tasks() == []

    (tmp_path / "nested" / "tareas.json").write_text("", "utf-8")
    assert store.list_tasks() == []


def test_corrupt_or_wrong_shape_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tareas.json"
    store = TaskStore(path)

    path.write_text("{not json", "utf-8")
    with pytest.raises(StorageError):
        store.list_tasks()

    path.write_text('{"id": 1}', "utf-8")
    with pytest.raises(StorageError):
        store.list_tasks()

    path.write_text('[{"titulo": "sin id"}]', "utf-8")
    with pytest.raises(StorageError):
        store.list_tasks()


def test_save_rewrites_whole_file_and_keeps_order(tmp_path: Path) -> None:
    path = tmp_path / "tareas.json"
    store = TaskStore(path)
    store.save_tasks([Task(3, "c", "z"), Task(1, "a", "x")])
    store.save_tasks([Task(1, "a", "x"), Task(2, "b", "y")])

    assert [t.id for t in store.list_tasks()] == [1, 2]
    on_disk = json.loads(path.read_text("utf-8"))
    assert on_disk[1] == {"id": 2, "titulo": "b", "descripcion": "y"}
    assert not list(tmp_path.glob("*.tmp"))


def test_non_ascii_text_survives(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tareas.json")
    store.save_tasks([Task(1, "Título", "descripción 🚀")])
    assert store.list_tasks()[0].descripcion == "descripción 🚀"


def test_user_store_uses_password_hash_key(tmp_path: Path) -> None:
    path = tmp_path / "usuarios.json"
    store = UserStore(path)
    store.save_users([User(1, "alice", "$2b$04$hash")])

    assert json.loads(path.read_text("utf-8")) == [
        {"id": 1, "username": "alice", "passwordHash": "$2b$04$hash"}
    ]
    assert store.find_by_username("alice") == User(1, "alice", "$2b$04$hash")
    assert store.find_by_username("Alice") is None


def test_json_list_store_round_trips_plain_dicts(tmp_path: Path) -> None:
    store = JsonListStore(tmp_path / "x.json")
    store.write_all([{"a": 1}])
    assert store.read_all() == [{"a": 1}]


def test_next_id_uses_highest_id() -> None:
    assert next_id([]) == 1
    assert next_id([Task(1, "a", "a"), Task(5, "b", "b"), Task(2, "c", "c")]) == 6


def test_invalid_utf8_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "tareas.json"
    path.write_bytes(b'[{"id": 1, "titulo": "\xff", "descripcion": "x"}]')
    with pytest.raises(StorageError):
        TaskStore(path).list_tasks()


def test_unencodable_text_fails_cleanly_and_keeps_previous_file(tmp_path: Path) -> None:
    path = tmp_path / "tareas.json"
    store = TaskStore(path)
    store.save_tasks([Task(1, "a", "x")])

    with pytest.raises(StorageError):
        store.save_tasks([Task(1, "a", "x"), Task(2, "\ud800", "y")])

    assert not list(tmp_path.glob("*.tmp"))
    assert [t.id for t in store.list_tasks()] == [1]
