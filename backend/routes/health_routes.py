import time

from flask import Blueprint, current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError


health_bp = Blueprint("health", __name__)

_STARTED_AT = time.monotonic()


@health_bp.get("/")
def index():
    cfg = current_app.config
    return jsonify(name=cfg["APP_NAME"], version=cfg["APP_VERSION"], description=cfg["APP_DESCRIPTION"]), 200


@health_bp.get("/health")
@health_bp.get("/healthz")
def health():
    store = current_app.extensions["task_service"].store
    body = {
        "status": "ok",
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "timestamp": int(time.time() * 1000),
        "store": current_app.config["TASK_STORE"],
    }
    try:
        store.ping()
    except SQLAlchemyError as exc:
        current_app.logger.error("Health check failed: store unreachable: %s", exc)
        body["status"] = "error"
        return jsonify(body), 503
    return jsonify(body), 200
