"""Request payload schemas for the task endpoints.

Routes pass the raw JSON body through ``validate_create`` or
``validate_update`` and hand only the returned model to the service.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.models.task_model import TaskStatus
from backend.utils.errors import ValidationError

TITLE_MAX_LENGTH = 100

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    user_id: Optional[str] = Field(default=None, alias="userId")

    @field_validator("description", "user_id", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TaskUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # omit a field to leave it unchanged
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


def _field_errors(exc: pydantic.ValidationError) -> List[Dict[str, str]]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err["loc"]]
        errors.append({"field": ".".join(loc) or "body", "message": err["msg"]})
    return errors


def _validate(schema: Type[SchemaT], payload: Any) -> SchemaT:
    if not isinstance(payload, dict):
        raise ValidationError([{"field": "body", "message": "Request body must be a JSON object"}])
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(_field_errors(exc)) from exc


def validate_create(payload: Any) -> TaskCreate:
    return _validate(TaskCreate, payload)


def validate_update(payload: Any) -> TaskUpdate:
    return _validate(TaskUpdate, payload)
