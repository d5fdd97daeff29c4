# tests/test_cli.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tareas_api.cli import main as cli_main
from tareas_api.config import Settings
from tareas_api.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _settings(tmp_path: Path, secret: str | None) -> Settings:
    return Settings(
        app_name="tareas-api",
        log_level="DEBUG",
        host="127.0.0.1",
        port=3999,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tareas.json",
        users_path=tmp_path / "usuarios.json",
        jwt_secret=secret,
        jwt_algorithm="HS256",
        token_ttl_seconds=3600,
        bcrypt_rounds=4,
    )


def test_setup_logging_writes_log_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path)
    logging.getLogger("tareas_api.test").info("hola")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hola" in (tmp_path / "tareas-api.log").read_text("utf-8")


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("tareas_api.api.app", logging.DEBUG))
    assert not f.filter(rec("uvicorn.access", logging.INFO))
    assert f.filter(rec("uvicorn.error", logging.WARNING))
    assert not f.filter(rec("httpx", logging.WARNING))


def test_main_serves_app_on_configured_port(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logging
) -> None:
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path, "s3cret"))
    monkeypatch.setattr(cli_main.uvicorn, "run", fake_run)

    cli_main.main()

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 3999
    assert calls["app"].state.app_state.settings.port == 3999


def test_main_exits_without_secret(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logging) -> None:
    monkeypatch.setattr(cli_main, "get_settings", lambda: _settings(tmp_path, None))
    monkeypatch.setattr(cli_main.uvicorn, "run", lambda *a, **k: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as exc:
        cli_main.main()
    assert exc.value.code == 2
