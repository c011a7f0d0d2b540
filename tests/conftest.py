import pytest
from flask_jwt_extended import create_access_token

from backend.app import create_app
from backend.config import TestingConfig
from backend.services.task_service import TaskService
from backend.stores import MemoryTaskStore, SqlTaskStore


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    app.extensions["task_service"].store.close()


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def make_token(app):
    def _make(identity="42"):
        with app.app_context():
            return create_access_token(identity=identity)
    return _make


@pytest.fixture(params=["memory", "sql"])
def store(request, tmp_path):
    if request.param == "memory":
        yield MemoryTaskStore()
    else:
        s = SqlTaskStore.from_url(f"sqlite:///{tmp_path / 'tasks.db'}")
        yield s
        s.close()


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.fixture
def sample_task():
    return {"title": "Write report", "userId": "u1"}
