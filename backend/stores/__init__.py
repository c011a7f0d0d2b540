from backend.stores.base import TaskStore
from backend.stores.memory_store import MemoryTaskStore, seed_sample_tasks
from backend.stores.sql_store import SqlTaskStore


def create_store(config) -> TaskStore:
    """Build the task store selected by ``TASK_STORE`` in ``config``."""
    kind = config.get("TASK_STORE", "memory")
    if kind == "memory":
        store = MemoryTaskStore()
    elif kind == "database":
        store = SqlTaskStore.from_url(
            config["DATABASE_URL"],
            echo=config.get("SQL_ECHO", False),
            create_schema=config.get("ENV") != "production",
        )
    else:
        raise ValueError(f"Unknown TASK_STORE {kind!r}; expected 'memory' or 'database'")

    if config.get("SEED_SAMPLE_TASKS") and not store.find_all():
        seed_sample_tasks(store)
    return store


__all__ = ["TaskStore", "MemoryTaskStore", "SqlTaskStore", "create_store", "seed_sample_tasks"]
