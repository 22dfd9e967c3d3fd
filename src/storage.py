"""Persistence for the task collection: one JSON array in one file.

Every call does a full read or a full overwrite. There is no locking and
no atomic rename; two processes writing at once can lose an update.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from errors import StorageDecodeError, StorageError
from models import Task

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "tasks.json"


class JSONStore:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else Path(DEFAULT_FILE_NAME)

    def load_tasks(self) -> List[Task]:
        """Read the whole collection.

        Missing file -> created as ``[]``, empty list returned.
        Zero-length file or a JSON null -> empty list.
        """
        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
            except OSError as exc:
                raise StorageError("loading", exc, str(self.path)) from exc
            logger.debug("created empty task file %s", self.path)
            return []

        try:
            data = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError("loading", exc, str(self.path)) from exc
        if not data:
            return []

        try:
            raw = json.loads(data)
        except (ValueError, RecursionError) as exc:
            logger.warning("malformed task file %s: %s", self.path, exc)
            raise StorageDecodeError(exc, str(self.path)) from exc
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("task file %s does not hold an array", self.path)
            raise StorageDecodeError(
                f"expected a JSON array, got {type(raw).__name__}", str(self.path)
            )

        try:
            tasks = [Task.from_dict(entry) for entry in raw]
        except StorageDecodeError as exc:
            exc.path = str(self.path)
            logger.warning("bad task record in %s: %s", self.path, exc.detail)
            raise
        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        """Overwrite the file with the given collection (pretty-printed)."""
        try:
            payload = [task.to_dict() for task in tasks]
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError("saving", exc, str(self.path)) from exc
        logger.debug("saved %d task(s) to %s", len(payload), self.path)
