from flask import Blueprint, current_app, g, jsonify, request

from backend.schemas.task_schema import validate_create, validate_update
from backend.services.task_service import TaskService
from backend.utils.auth import requester_id


tasks_bp = Blueprint("tasks", __name__)


def _service() -> TaskService:
    return current_app.extensions["task_service"]


def _json_body():
    # no body or unparseable JSON reads as {}; any other JSON value is validated as sent
    payload = request.get_json(silent=True)
    return {} if payload is None else payload


@tasks_bp.before_request
def authenticate():
    # Resolves (and, when AUTH_REQUIRED, enforces) the caller for every task route
    g.requester_id = requester_id()


@tasks_bp.get("/ping")
def ping():
    return jsonify(message="tasks ok"), 200


@tasks_bp.get("")
def list_tasks():
    user_id = request.args.get("userId") or None
    current_app.logger.info("Received request to get all tasks (userId=%s)", user_id)
    tasks = _service().list_tasks(user_id=user_id)
    return jsonify(tasks=[t.to_dict() for t in tasks], count=len(tasks)), 200


@tasks_bp.get("/<task_id>")
def get_task(task_id):
    current_app.logger.info("Received request to get task with ID: %s", task_id)
    task = _service().get_task(task_id)
    return jsonify(task=task.to_dict()), 200


@tasks_bp.post("")
def create_task():
    data = validate_create(_json_body())
    current_app.logger.info("Received request to create new task: %s", data.title)
    task = _service().create_task(data, g.requester_id)
    return jsonify(task=task.to_dict()), 201


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    current_app.logger.info("Received request to update task with ID: %s", task_id)
    data = validate_update(_json_body())
    task = _service().update_task(task_id, data)
    return jsonify(task=task.to_dict()), 200


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    current_app.logger.info("Received request to delete task with ID: %s", task_id)
    _service().delete_task(task_id)
    return "", 204
