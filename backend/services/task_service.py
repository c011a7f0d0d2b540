import logging
from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from backend.models.task_model import Task, utcnow
from backend.schemas.task_schema import TaskCreate, TaskUpdate
from backend.stores.base import TaskStore
from backend.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class TaskService:
    """Business rules for the task lifecycle, on top of an injected store."""

    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self, user_id: Optional[str] = None) -> List[Task]:
        logger.info("Listing tasks (userId=%s)", user_id)
        return self.store.find_all(user_id=user_id)

    def get_task(self, task_id: str) -> Task:
        logger.info("Getting task with ID: %s", task_id)
        task = self.store.find_by_id(task_id)
        if task is None:
            raise NotFoundError(f"Task with ID {task_id} not found")
        return task

    def create_task(self, data: TaskCreate, requester_id: str) -> Task:
        logger.info("Creating new task: %s", data.title)
        now = utcnow()
        task = Task(
            id=self.store.new_id(),
            title=data.title,
            description=data.description,
            status=data.status,
            user_id=data.user_id or requester_id,
            created_at=now,
            updated_at=now,
        )
        return self.store.insert(task)

    def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        logger.info("Updating task with ID: %s", task_id)
        current = self.get_task(task_id)

        now = utcnow()
        # updatedAt must move forward even when the clock has not ticked
        if now <= current.updated_at:
            now = current.updated_at + timedelta(microseconds=1)

        updated = self.store.update(replace(current, **data.changes(), updated_at=now))
        if updated is None:
            # removed between the read and the write
            raise NotFoundError(f"Task with ID {task_id} not found")
        return updated

    def delete_task(self, task_id: str) -> None:
        logger.info("Deleting task with ID: %s", task_id)
        if not self.store.remove(task_id):
            raise NotFoundError(f"Task with ID {task_id} not found")
