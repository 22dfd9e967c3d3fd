"""Command dispatch for the task tracker.

Each command loads the whole collection, mutates it in memory and saves it
back (``list`` and ``help`` never save). Command methods raise the typed
errors from ``errors``; ``run`` is the only place they are turned into
output, so nothing is saved once a command has failed.
"""
import logging
import re
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

import click

from errors import EmptyDescriptionError, InvalidIdError, TaskCliError, UsageError
from models import TaskStatus
from storage import JSONStore
from tasklist import TaskList
from theme import ERROR_GLYPH, OK_GLYPH

logger = logging.getLogger(__name__)

PROG = "task-cli"
# Same shape as a base-10 integer literal: optional sign, ASCII digits.
ID_RE = re.compile(r"[+-]?[0-9]+")
# Ids are 64-bit signed integers.
ID_MIN, ID_MAX = -(2 ** 63), 2 ** 63 - 1

HELP_LINES = (
    "Task CLI - Commands:",
    f'  {PROG} add "Task description"',
    f'  {PROG} update <id> "New description"',
    f"  {PROG} delete <id>",
    f"  {PROG} mark-in-progress <id>",
    f"  {PROG} mark-done <id>",
    f"  {PROG} list",
    f"  {PROG} list todo|in-progress|done",
    f"  {PROG} help",
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


def parse_id(raw: str) -> int:
    if not ID_RE.fullmatch(raw):
        raise InvalidIdError(raw)
    try:
        value = int(raw)
    except ValueError:
        raise InvalidIdError(raw) from None
    if not ID_MIN <= value <= ID_MAX:
        raise InvalidIdError(raw)
    return value


def join_description(words: Sequence[str]) -> str:
    description = " ".join(words).strip()
    if not description:
        raise EmptyDescriptionError()
    return description


class Handler:
    def __init__(self, store: JSONStore, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.clock = clock or _local_now
        self.commands: Dict[str, Callable[[List[str]], Optional[str]]] = {
            'add': self.add,
            'list': self.list,
            'update': self.update,
            'delete': self.delete,
            'mark-in-progress': self.mark_in_progress,
            'mark-done': self.mark_done,
        }

    def run(self, args: Sequence[str]) -> None:
        """Dispatch on the first token; print the outcome, never raise TaskCliError."""
        if not args:
            self.print_help()
            return
        cmd, rest = args[0], list(args[1:])
        if cmd == 'help':
            self.print_help()
            return
        command = self.commands.get(cmd)
        if command is None:
            click.echo(f"{ERROR_GLYPH} Unknown command: {cmd}")
            self.print_help()
            return
        logger.debug("dispatching %s args=%r", cmd, rest)
        try:
            message = command(rest)
        except TaskCliError as exc:
            logger.debug("%s failed: %s: %s", cmd, type(exc).__name__, exc)
            click.echo(f"{ERROR_GLYPH} {exc}")
            return
        if message:
            click.echo(f"{OK_GLYPH} {message}")

    # -------------------- commands --------------------
    def add(self, args: List[str]) -> str:
        if len(args) < 1:
            raise UsageError(f'Usage: {PROG} add "Task description"')
        description = join_description(args)
        tasks = self._load()
        task = tasks.add(description, self.clock())
        self.store.save_tasks(tasks.tasks)
        return f"Task added successfully (ID: {task.id})"

    def list(self, args: List[str]) -> None:
        tasks = self._load()
        status = TaskStatus.parse(args[0]) if args else None
        for line in tasks.render(status):
            click.echo(line)

    def update(self, args: List[str]) -> str:
        if len(args) < 2:
            raise UsageError(f'Usage: {PROG} update <id> "New description"')
        task_id = parse_id(args[0])
        description = join_description(args[1:])
        tasks = self._load()
        tasks.update_description(task_id, description, self.clock())
        self.store.save_tasks(tasks.tasks)
        return "Task updated successfully"

    def delete(self, args: List[str]) -> str:
        if len(args) < 1:
            raise UsageError(f"Usage: {PROG} delete <id>")
        task_id = parse_id(args[0])
        tasks = self._load()
        tasks.remove(task_id)
        self.store.save_tasks(tasks.tasks)
        return "Task deleted successfully"

    def mark_in_progress(self, args: List[str]) -> str:
        return self.mark_status(args, TaskStatus.IN_PROGRESS)

    def mark_done(self, args: List[str]) -> str:
        return self.mark_status(args, TaskStatus.DONE)

    def mark_status(self, args: List[str], status: TaskStatus) -> str:
        if len(args) < 1:
            raise UsageError(f"Usage: {PROG} mark-{status.value} <id>")
        task_id = parse_id(args[0])
        tasks = self._load()
        tasks.set_status(task_id, status, self.clock())
        self.store.save_tasks(tasks.tasks)
        return f"Task marked as {status.value}"

    def print_help(self) -> None:
        for line in HELP_LINES:
            click.echo(line)

    # -------------------- helpers --------------------
    def _load(self) -> TaskList:
        return TaskList(self.store.load_tasks())
