"""Tests for the shared structlog-backed logging setup."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import pytest
import structlog

from cumulus_common.logging import _resolve_level, configure_logging


pytestmark = pytest.mark.unit_common


@pytest.fixture(autouse=True)
def _clear_logging_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CUMULUS_LOG_LEVEL", "CUMULUS_LOG_JSON", "CUMULUS_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@contextmanager
def isolated_root() -> Iterator[logging.Logger]:
    """Detach the current root handlers (pytest's included) for one test body."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        structlog.reset_defaults()


@pytest.mark.parametrize(
    "value, debug, expected",
    [
        (None, False, logging.WARNING),
        ("info", False, logging.INFO),
        ("ERROR", False, logging.ERROR),
        ("15", False, 15),
        (logging.CRITICAL, False, logging.CRITICAL),
        ("bogus", False, logging.INFO),
        ("ERROR", True, logging.DEBUG),
    ],
)
def test_resolve_level(value, debug, expected) -> None:
    assert _resolve_level(value, debug) == expected


def test_log_file_receives_console_output(tmp_path: Path) -> None:
    log_file = tmp_path / "selector.log"
    with isolated_root() as root:
        configure_logging(level="DEBUG", log_file=str(log_file))

        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [logging.FileHandler]

        logging.getLogger("cumulus_ui.test").debug("session started")
        root.handlers[0].flush()
        assert "session started" in log_file.read_text()


def test_json_output_is_structured(tmp_path: Path) -> None:
    log_file = tmp_path / "selector.jsonl"
    with isolated_root() as root:
        configure_logging(level="INFO", log_file=str(log_file), json=True)

        structlog.get_logger("cumulus_ui.test").info("picked", action="connect")
        root.handlers[0].flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "picked"
        assert record["action"] == "connect"
        assert record["level"] == "info"


def test_environment_configures_level_and_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    log_file = tmp_path / "env.log"
    monkeypatch.setenv("CUMULUS_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("CUMULUS_LOG_FILE", str(log_file))
    with isolated_root() as root:
        configure_logging()

        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0], logging.FileHandler)


def test_existing_handlers_are_kept_without_force() -> None:
    with isolated_root() as root:
        sentinel = logging.NullHandler()
        root.addHandler(sentinel)
        configure_logging(level="DEBUG")
        assert root.handlers == [sentinel]


def test_force_replaces_existing_handlers() -> None:
    with isolated_root() as root:
        sentinel = logging.NullHandler()
        root.addHandler(sentinel)
        configure_logging(level="INFO", force=True)

        assert sentinel not in root.handlers
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
