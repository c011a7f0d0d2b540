"""In-process task storage.

State lives for the lifetime of the store instance (normally the app
process) and is lost on restart.
"""
import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional

from backend.models.task_model import Task, TaskStatus
from backend.stores.base import TaskStore


class MemoryTaskStore(TaskStore):
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        # Counter never rewinds, so deleted ids are not handed out again
        with self._lock:
            return str(next(self._ids))

    def insert(self, task: Task) -> Task:
        with self._lock:
            self._tasks.append(replace(task))
        return replace(task)

    def find_by_id(self, task_id: str) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            return replace(self._tasks[index]) if index is not None else None

    def find_all(self, user_id: Optional[str] = None) -> List[Task]:
        with self._lock:
            tasks = [replace(t) for t in self._tasks if user_id is None or t.user_id == user_id]
        # sort is stable, so equal timestamps stay in insertion order
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    def update(self, task: Task) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task.id)
            if index is None:
                return None
            self._tasks[index] = replace(task)
        return replace(task)

    def remove(self, task_id: str) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return False
            del self._tasks[index]
            return True

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def _index_of(self, task_id: str) -> Optional[int]:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None


def seed_sample_tasks(store: TaskStore) -> None:
    """Populate a fresh store with the demo tasks shown in local development."""
    samples = [
        ("Complete project setup", "Set up the initial project structure",
         TaskStatus.COMPLETED, datetime(2023, 1, 1, tzinfo=timezone.utc), datetime(2023, 1, 2, tzinfo=timezone.utc)),
        ("Implement authentication", "Add JWT authentication to the API",
         TaskStatus.IN_PROGRESS, datetime(2023, 1, 3, tzinfo=timezone.utc), datetime(2023, 1, 3, tzinfo=timezone.utc)),
    ]
    for title, description, status, created, updated in samples:
        store.insert(Task(
            id=store.new_id(),
            title=title,
            description=description,
            status=status,
            user_id="1",
            created_at=created,
            updated_at=updated,
        ))
