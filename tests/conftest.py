from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from cli import Handler
from storage import JSONStore

T0 = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)


class FakeClock:
    """Returns T0, T0 + 1 min, T0 + 2 min, ... on successive calls."""

    def __init__(self, start: datetime = T0):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(minutes=1)
        return now


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NO_COLOR", "1")
    for name in (
        "FORCE_COLOR",
        "COLORTERM",
        "TASK_CLI_FILE",
        "TASK_CLI_LOG_LEVEL",
        "TASK_CLI_COLOR_ID",
        "TASK_CLI_COLOR_TODO",
        "TASK_CLI_COLOR_IN_PROGRESS",
        "TASK_CLI_COLOR_DONE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file: Path) -> JSONStore:
    return JSONStore(tasks_file)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def handler(store: JSONStore, clock: FakeClock) -> Handler:
    return Handler(store, clock=clock)
