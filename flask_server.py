"""
A simple Flask app exposing an in-memory to-do list API.
"""

import logging
import os
import sys
from typing import Optional

from flask import Flask, request, jsonify, current_app
from werkzeug.exceptions import BadRequest

from config import ConfigError, DEFAULT_ENV_FILE, load_settings
from todo_store import EmptyBodyError, TodoNotFoundError, TodoStore

logger = logging.getLogger(__name__)


def _store() -> TodoStore:
    return current_app.extensions["todo_store"]


def _parse_todo_payload():
    """Decode the POST body into (body, completed).

    Anything that doesn't decode into a todo-shaped object is a BadRequest,
    same as malformed JSON.
    """
    data = request.get_json()
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object")

    body = data.get("body", "")
    completed = data.get("completed", False)
    if body is None:
        body = ""
    if completed is None:
        completed = False
    if not isinstance(body, str):
        raise BadRequest("'body' must be a string")
    if not isinstance(completed, bool):
        raise BadRequest("'completed' must be a boolean")
    return body, completed


def create_app(store: Optional[TodoStore] = None) -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["todo_store"] = store if store is not None else TodoStore()

    @app.errorhandler(EmptyBodyError)
    def handle_empty_body(e):
        return jsonify({"error": e.message}), 400

    @app.errorhandler(TodoNotFoundError)
    def handle_not_found(e):
        return jsonify({"error": e.message}), 404

    @app.route('/api/todos', methods=['GET'])
    def get_todos():
        return jsonify(_store().list()), 200

    @app.route('/api/todos', methods=['POST'])
    def create_todo():
        body, completed = _parse_todo_payload()
        todo = _store().create(body, completed=completed)
        return jsonify(todo), 201

    @app.route('/api/todos/<todo_id>', methods=['PATCH'])
    def toggle_todo(todo_id):
        return jsonify(_store().toggle(todo_id)), 200

    @app.route('/api/todos/<todo_id>', methods=['DELETE'])
    def delete_todo(todo_id):
        _store().delete(todo_id)
        # "true" is a string on the wire, not a JSON boolean
        return jsonify({"success": "true"}), 200

    return app


app = create_app()


def main():
    logging.basicConfig(level=logging.INFO)

    env_file = os.getenv("TODO_ENV_FILE", DEFAULT_ENV_FILE)
    try:
        settings = load_settings(env_file)
    except ConfigError as e:
        logger.critical(f"Startup failed: {e}")
        sys.exit(1)

    logger.info(f"Starting to-do API on {settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=settings.debug, use_reloader=False)


if __name__ == '__main__':
    main()
