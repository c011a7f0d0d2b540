"""Durable task storage on a relational ``tasks`` table via SQLAlchemy."""
import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine, literal_column, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from backend.models.task_model import Task, TaskStatus
from backend.stores.base import TaskStore

logger = logging.getLogger(__name__)

Base = declarative_base()


class TaskModel(Base):
    __tablename__ = "tasks"
    id = Column(String(36), primary_key=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default=TaskStatus.PENDING.value)
    user_id = Column("userId", String, nullable=False, index=True)
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False)
    updated_at = Column("updatedAt", DateTime(timezone=True), nullable=False)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    kwargs = {"echo": echo, "future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlTaskStore(TaskStore):
    def __init__(self, engine: Engine, create_schema: bool = True):
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)
        if create_schema:
            self.create_schema()

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False, create_schema: bool = True) -> "SqlTaskStore":
        return cls(build_engine(database_url, echo=echo), create_schema=create_schema)

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("Ensured tasks table exists on %s", self.engine.url.render_as_string(hide_password=True))

    def new_id(self) -> str:
        return str(uuid.uuid4())

    def insert(self, task: Task) -> Task:
        model = TaskModel(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            user_id=task.user_id,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
        with self._sessions.begin() as session:
            session.add(model)
        return self._model_to_entity(model)

    def find_by_id(self, task_id: str) -> Optional[Task]:
        with self._sessions() as session:
            model = session.get(TaskModel, task_id)
            return self._model_to_entity(model) if model else None

    def find_all(self, user_id: Optional[str] = None) -> List[Task]:
        query = select(TaskModel)
        if user_id is not None:
            query = query.where(TaskModel.user_id == user_id)
        query = query.order_by(TaskModel.created_at.desc())
        if self.engine.dialect.name == "sqlite":
            # rowid follows insertion, so equal createdAt values keep insertion order.
            # Other engines have no insertion key on this table and return ties in engine order.
            query = query.order_by(literal_column("tasks.rowid"))
        with self._sessions() as session:
            return [self._model_to_entity(m) for m in session.scalars(query).all()]

    def update(self, task: Task) -> Optional[Task]:
        with self._sessions.begin() as session:
            model = session.get(TaskModel, task.id)
            if model is None:
                return None
            model.title = task.title
            model.description = task.description
            model.status = task.status.value
            model.user_id = task.user_id
            model.updated_at = task.updated_at
        return self._model_to_entity(model)

    def remove(self, task_id: str) -> bool:
        with self._sessions.begin() as session:
            model = session.get(TaskModel, task_id)
            if model is None:
                return False
            session.delete(model)
            return True

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def close(self) -> None:
        self.engine.dispose()

    def _model_to_entity(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            user_id=model.user_id,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )
