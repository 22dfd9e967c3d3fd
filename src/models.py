"""Data models for the task tracker.

A task is persisted as a flat JSON object with camelCase timestamp keys
(createdAt / updatedAt); everything else keeps its attribute name.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping

from errors import InvalidStatusError, StorageDecodeError

# RFC 3339 writers may emit "Z" and anywhere from 1 to 9 fractional digits;
# older fromisoformat wants an explicit offset and exactly 3 or 6 digits.
_FRACTION_RE = re.compile(r"\.(\d+)")


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "TaskStatus":
        """Map one of the three lowercase tokens to a status."""
        token = raw.strip()
        for status in cls:
            if status.value == token:
                return status
        raise InvalidStatusError(raw)


@dataclass
class Task:
    """A single tracked task.

    Fields:
        id: Positive integer, unique within the collection, never reused.
        description: Trimmed, non-empty text.
        status: Lifecycle stage; always TODO at creation.
        created_at: Aware timestamp fixed when the task is added.
        updated_at: Aware timestamp refreshed on every mutation.
    """
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def touch(self, now: datetime) -> None:
        self.updated_at = now

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        if not isinstance(raw, Mapping):
            raise StorageDecodeError(f"task record must be an object, got {type(raw).__name__}")
        missing = [k for k in ("id", "description", "status", "createdAt", "updatedAt") if k not in raw]
        if missing:
            raise StorageDecodeError(f"task record missing field(s): {', '.join(missing)}")
        tid = raw["id"]
        if isinstance(tid, bool) or not isinstance(tid, int):
            raise StorageDecodeError(f"task id must be an integer, got {tid!r}")
        description = raw["description"]
        if not isinstance(description, str):
            raise StorageDecodeError(f"task {tid}: description must be a string")
        try:
            status = TaskStatus.parse(str(raw["status"]))
        except InvalidStatusError:
            raise StorageDecodeError(f"task {tid}: unknown status {raw['status']!r}") from None
        return cls(
            id=tid,
            description=description,
            status=status,
            created_at=parse_timestamp(raw["createdAt"]),
            updated_at=parse_timestamp(raw["updatedAt"]),
        )


def parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise StorageDecodeError(f"timestamp must be a string, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise StorageDecodeError(f"invalid timestamp {value!r}") from None
