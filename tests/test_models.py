from datetime import datetime, timedelta, timezone

import pytest

from errors import InvalidStatusError, StorageDecodeError
from models import Task, TaskStatus, parse_timestamp


def _task(**overrides):
    when = datetime(2026, 10, 17, 9, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))
    fields = dict(id=1, description="Write spec", status=TaskStatus.TODO, created_at=when, updated_at=when)
    fields.update(overrides)
    return Task(**fields)


@pytest.mark.parametrize("raw,expected", [
    ("todo", TaskStatus.TODO),
    ("in-progress", TaskStatus.IN_PROGRESS),
    ("done", TaskStatus.DONE),
    ("  done ", TaskStatus.DONE),
])
def test_status_parse(raw, expected):
    assert TaskStatus.parse(raw) is expected


@pytest.mark.parametrize("raw", ["Done", "in_progress", "doing", "", "badstatus"])
def test_status_parse_rejects_unknown_tokens(raw):
    with pytest.raises(InvalidStatusError) as info:
        TaskStatus.parse(raw)
    assert str(info.value) == "Invalid status. Allowed: todo, in-progress, done"


def test_to_dict_uses_persisted_field_names():
    d = _task().to_dict()
    assert list(d) == ["id", "description", "status", "createdAt", "updatedAt"]
    assert d["status"] == "todo"
    assert d["createdAt"] == "2026-10-17T09:30:15.123456+02:00"


def test_from_dict_restores_task():
    task = _task(status=TaskStatus.IN_PROGRESS)
    assert Task.from_dict(task.to_dict()) == task


def test_from_dict_accepts_rfc3339_nanoseconds_and_z():
    task = Task.from_dict({
        "id": 3,
        "description": "x",
        "status": "done",
        "createdAt": "2024-05-01T10:20:30.123456789+07:00",
        "updatedAt": "2024-05-01T03:20:30Z",
    })
    assert task.created_at == datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=timezone(timedelta(hours=7)))
    assert task.updated_at == datetime(2024, 5, 1, 3, 20, 30, tzinfo=timezone.utc)


def test_parse_timestamp_pads_short_fractions():
    assert parse_timestamp("2024-05-01T10:20:30.5+00:00").microsecond == 500000


@pytest.mark.parametrize("raw", [
    [],
    {"id": 1, "description": "x", "status": "todo", "createdAt": "2024-05-01T10:20:30Z"},
    {"id": "1", "description": "x", "status": "todo", "createdAt": "2024-05-01T10:20:30Z", "updatedAt": "2024-05-01T10:20:30Z"},
    {"id": True, "description": "x", "status": "todo", "createdAt": "2024-05-01T10:20:30Z", "updatedAt": "2024-05-01T10:20:30Z"},
    {"id": 1, "description": 5, "status": "todo", "createdAt": "2024-05-01T10:20:30Z", "updatedAt": "2024-05-01T10:20:30Z"},
    {"id": 1, "description": "x", "status": "later", "createdAt": "2024-05-01T10:20:30Z", "updatedAt": "2024-05-01T10:20:30Z"},
    {"id": 1, "description": "x", "status": "todo", "createdAt": "yesterday", "updatedAt": "2024-05-01T10:20:30Z"},
])
def test_from_dict_rejects_malformed_records(raw):
    with pytest.raises(StorageDecodeError):
        Task.from_dict(raw)
