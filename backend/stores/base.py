from abc import ABC, abstractmethod
from typing import List, Optional

from backend.models.task_model import Task


class TaskStore(ABC):
    """Persistence contract shared by every task backing.

    Stores own the authoritative records and only ever hand out copies.
    ``find_all`` orders newest first; tasks created at the same instant keep
    their insertion order.
    """

    @abstractmethod
    def new_id(self) -> str:
        ...

    @abstractmethod
    def insert(self, task: Task) -> Task:
        ...

    @abstractmethod
    def find_by_id(self, task_id: str) -> Optional[Task]:
        ...

    @abstractmethod
    def find_all(self, user_id: Optional[str] = None) -> List[Task]:
        ...

    @abstractmethod
    def update(self, task: Task) -> Optional[Task]:
        """Replace the stored record with ``task``; None if it no longer exists."""

    @abstractmethod
    def remove(self, task_id: str) -> bool:
        ...

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        pass
