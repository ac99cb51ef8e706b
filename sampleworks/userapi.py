"""HTTP API over the user store, with request logging, request ids and CORS."""

import argparse
import logging
import time
from dataclasses import asdict
from pathlib import Path

from flask import Blueprint, Flask, Response, g, jsonify, request, send_from_directory

from sampleworks.userstore import UserNotFoundError, UserStore

logger = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Origin, Content-Type, Content-Length, Accept-Encoding, "
        "X-CSRF-Token, Authorization"
    ),
}


def _not_found():
    return jsonify({"error": "User not found"}), 404


def _bind(fields, *, required):
    """Read string fields from the JSON body; raise ValueError when it does not fit."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    values = {}
    for field in fields:
        value = data.get(field)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError(f"field '{field}' must be a string")
        if required and not value:
            raise ValueError(f"field '{field}' is required")
        values[field] = value
    return values


def make_user_blueprint(store):
    """Build the blueprint serving CRUD routes for ``store`` under ``/users``."""
    bp = Blueprint("users", __name__)

    @bp.get("/users")
    def get_users():
        return jsonify([asdict(user) for user in store.get_all()])

    @bp.get("/users/<user_id>")
    def get_user_by_id(user_id):
        try:
            user = store.get_by_id(user_id)
        except UserNotFoundError:
            return _not_found()
        return jsonify(asdict(user))

    @bp.post("/users")
    def create_user():
        try:
            fields = _bind(("name", "email"), required=True)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        user = store.create(fields["name"], fields["email"])
        return jsonify(asdict(user)), 201

    @bp.put("/users/<user_id>")
    def update_user(user_id):
        try:
            fields = _bind(("name", "email"), required=False)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        try:
            user = store.update(user_id, fields["name"], fields["email"])
        except UserNotFoundError:
            return _not_found()
        return jsonify({"user": asdict(user), "message": "User updated successfully"})

    @bp.delete("/users/<user_id>")
    def delete_user(user_id):
        try:
            store.delete(user_id)
        except UserNotFoundError:
            return _not_found()
        return jsonify({"message": "User deleted successfully"})

    return bp


def create_app(store=None, web_dir="web"):
    """Build the application: static site, health check and the v1 API."""
    if store is None:
        store = UserStore()
    web_path = Path(web_dir).resolve()
    app = Flask(__name__, static_folder=str(web_path), static_url_path="/static")

    @app.before_request
    def _start_request():
        g.started = time.perf_counter()
        g.request_id = time.time_ns()
        if request.method == "OPTIONS":
            return Response(status=204)
        return None

    @app.after_request
    def _finish_request(response):
        response.headers["X-Request-ID"] = str(g.get("request_id", time.time_ns()))
        response.headers.update(_CORS_HEADERS)
        latency = time.perf_counter() - g.get("started", time.perf_counter())
        logger.info(
            "[%s] %s %s %d %.6fs",
            request.method,
            request.path,
            request.remote_addr,
            response.status_code,
            latency,
        )
        return response

    @app.get("/")
    def index():
        return send_from_directory(web_path, "index.html")

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "message": "Service is up and running"})

    api = Blueprint("api_v1", __name__)

    @api.get("/hello")
    def hello():
        return jsonify({"message": "Hello from the API!"})

    app.register_blueprint(api, url_prefix="/api/v1")
    app.register_blueprint(make_user_blueprint(store), url_prefix="/api/v1")
    return app


def main(argv=None):
    """Run the user API server."""
    parser = argparse.ArgumentParser(description="Serve the user API.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--web-dir", default="web")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = create_app(UserStore(), args.web_dir)
    logger.info("Starting server on %s:%d", args.host, args.port)
    try:
        app.run(host=args.host or "0.0.0.0", port=args.port)
    except OSError as exc:
        logger.critical("Failed to start server: %s", exc)
        return 1
    return 0