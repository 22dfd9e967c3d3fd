"""Collection logic: id allocation, lookup, mutation, filtering and rendering.

A TaskList wraps the list loaded from the store for the length of one
command. Insertion order is the display order; nothing here reorders.
"""
from datetime import datetime
from typing import Iterable, Iterator, List, Optional
from models import Task, TaskStatus
from errors import TaskNotFoundError
from theme import color

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
EMPTY_NOTICE = "(empty) No tasks found."


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # -------------------- id management --------------------
    def next_id(self) -> int:
        """Highest id so far plus one; 1 for an empty list."""
        return max((t.id for t in self.tasks), default=0) + 1

    # -------------------- queries --------------------
    def find(self, task_id: int) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def with_status(self, status: Optional[TaskStatus]) -> List[Task]:
        if status is None:
            return list(self.tasks)
        return [t for t in self.tasks if t.status == status]

    # -------------------- task operations --------------------
    def add(self, description: str, now: datetime) -> Task:
        task = Task(
            id=self.next_id(),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        self.tasks.append(task)
        return task

    def update_description(self, task_id: int, description: str, now: datetime) -> Task:
        task = self.find(task_id)
        task.description = description
        task.touch(now)
        return task

    def set_status(self, task_id: int, status: TaskStatus, now: datetime) -> Task:
        task = self.find(task_id)
        task.status = status
        task.touch(now)
        return task

    def remove(self, task_id: int) -> Task:
        task = self.find(task_id)
        self.tasks = [t for t in self.tasks if t is not task]
        return task

    # -------------------- display --------------------
    def render(self, status: Optional[TaskStatus] = None) -> List[str]:
        if not self.tasks:
            return [EMPTY_NOTICE]
        return [format_task(t) for t in self.with_status(status)]


def format_task(task: Task) -> str:
    """``[id] (status) description | updated: YYYY-MM-DD HH:MM``."""
    tid = color(f"[{task.id}]", 'id', bold=True)
    status = color(f"({task.status.value})", task.status.value)
    updated = task.updated_at.strftime(TIMESTAMP_FORMAT)
    return f"{tid} {status} {task.description} | updated: {updated}"
