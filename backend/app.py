import json

import click
from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager


def create_app(config_object="backend.config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)

    from backend.utils.logging_setup import configure_logging

    configure_logging(app.config["LOG_LEVEL"])

    # Core extensions
    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)
    jwt = JWTManager(app)

    # Task store and service live for the lifetime of the app
    from backend.services.task_service import TaskService
    from backend.stores import create_store

    store = create_store(app.config)
    app.extensions["task_service"] = TaskService(store)
    app.logger.info("Using %s task store", app.config["TASK_STORE"])

    # Register blueprints
    from backend.routes.health_routes import health_bp
    from backend.routes.task_routes import tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp, url_prefix="/tasks")

    from backend.utils.error_handlers import register_error_handlers

    register_error_handlers(app, jwt)
    _register_commands(app)

    return app


def _register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the tasks table on DATABASE_URL."""
        from backend.stores.sql_store import SqlTaskStore

        store = SqlTaskStore.from_url(app.config["DATABASE_URL"], create_schema=False)
        store.create_schema()
        store.close()
        click.echo("tasks table ready")

    @app.cli.command("placeholder-demo")
    @click.option("--post-id", default=1, show_default=True)
    @click.option("--user-id", default=1, show_default=True)
    def placeholder_demo(post_id, user_id):
        """Exercise the JSONPlaceholder client against the public API."""
        from backend.clients.jsonplaceholder_client import JsonPlaceholderClient

        client = JsonPlaceholderClient(
            app.config["JSONPLACEHOLDER_BASE_URL"],
            timeout=app.config["JSONPLACEHOLDER_TIMEOUT"],
        )
        post = client.get_post(post_id)
        click.echo(f"Post {post_id} ({post.status} {post.status_text}):")
        click.echo(json.dumps(post.data, indent=2))

        comments = client.get_comments_by_post(post_id)
        click.echo(f"{len(comments.data)} comments on post {post_id}")

        todos = client.get_todos_by_user(user_id)
        done = sum(1 for t in todos.data if t.get("completed"))
        click.echo(f"User {user_id} has {len(todos.data)} todos, {done} completed")

