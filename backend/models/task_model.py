from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Task:
    id: str
    title: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        """Response DTO with the camelCase keys clients expect."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "userId": self.user_id,
            "createdAt": self.created_at.isoformat(timespec="microseconds"),
            "updatedAt": self.updated_at.isoformat(timespec="microseconds"),
        }
