"""Flask application for Taskboard.

Routes:
- GET    /                  browser UI
- GET    /health            health check
- GET    /view-tasks        all tasks
- POST   /create-task       create a task from a JSON body
- DELETE /delete-task/<id>  delete a task by ID
"""

import logging
from typing import Optional

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from .config import AppConfig
from .models import PRIORITIES, STATUSES
from .service import create_task, delete_task, list_tasks
from .store import JsonFileStore, TaskStore


logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None, store: Optional[TaskStore] = None
) -> Flask:
    """Create the Flask app.

    Args:
        config: Application settings (defaults if omitted).
        store: Task store to use. Defaults to a JsonFileStore at
            ``config.data_file``.
    """
    config = config or AppConfig()
    if store is None:
        store = JsonFileStore(config.data_file, indent=config.json_indent)

    app = Flask(__name__)
    app.config["TASKBOARD"] = config
    app.config["TASK_STORE"] = store

    @app.route("/", methods=["GET"])
    def index():
        return render_template("index.html", statuses=STATUSES, priorities=PRIORITIES)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Health check endpoint."""
        return jsonify({"status": "healthy", "service": "taskboard"})

    @app.route("/view-tasks", methods=["GET"])
    def view_tasks():
        status, body = list_tasks(store)
        return jsonify(body), status

    @app.route("/create-task", methods=["POST"])
    def create_task_route():
        payload = request.get_json(silent=True)
        status, body = create_task(store, payload)
        return jsonify(body), status

    @app.route("/delete-task/", defaults={"task_id": None}, methods=["DELETE"])
    @app.route("/delete-task/<task_id>", methods=["DELETE"])
    def delete_task_route(task_id):
        status, body = delete_task(store, task_id)
        return jsonify(body), status

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return (
            jsonify({"error": "INTERNAL_ERROR", "message": "Unexpected server error."}),
            500,
        )

    logger.debug("App created with store %r", store)
    return app
