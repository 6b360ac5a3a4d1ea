"""Flask application factory for the identity directory web view.

The ``create_app`` function wraps an existing directory and returns a
Flask app whose endpoints mirror the ``Users`` lookups.  A missing
record is a 404 with a JSON ``error`` body.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from flask import Flask, Response, jsonify, request

from py_users.mock import MockUsers
from py_users.persistence import load_users

_HTTP_NOT_FOUND = 404


def create_app(users: MockUsers) -> Flask:
    """Create and configure the Flask application.

    Args:
        users: The directory to serve.  It is read, never modified.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.route("/api/users")
    def list_users() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return all users, or the one matching ``?name=``."""
        name = request.args.get("name")
        if name is None:
            return jsonify([u.to_dict() for u in users.list_users()])
        user = users.get_user_by_name(name)
        if user is None:
            return jsonify({"error": f"No user named '{name}'"}), _HTTP_NOT_FOUND
        return jsonify(user.to_dict())

    @app.route("/api/users/<int(signed=True):uid>")
    def get_user(uid: int) -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return one user by uid."""
        user = users.get_user_by_uid(uid)
        if user is None:
            return jsonify({"error": f"No user with uid {uid}"}), _HTTP_NOT_FOUND
        return jsonify(user.to_dict())

    @app.route("/api/groups")
    def list_groups() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return all groups, or the one matching ``?name=``."""
        name = request.args.get("name")
        if name is None:
            return jsonify([g.to_dict() for g in users.list_groups()])
        group = users.get_group_by_name(name)
        if group is None:
            return jsonify({"error": f"No group named '{name}'"}), _HTTP_NOT_FOUND
        return jsonify(group.to_dict())

    @app.route("/api/groups/<int(signed=True):gid>")
    def get_group(gid: int) -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return one group by gid."""
        group = users.get_group_by_gid(gid)
        if group is None:
            return jsonify({"error": f"No group with gid {gid}"}), _HTTP_NOT_FOUND
        return jsonify(group.to_dict())

    @app.route("/api/current")
    def current() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the current identity."""
        return jsonify(
            {
                "uid": users.get_current_uid(),
                "username": users.get_current_username(),
                "gid": users.get_current_gid(),
                "groupname": users.get_current_groupname(),
            }
        )

    @app.route("/api/effective")
    def effective() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the effective identity."""
        return jsonify(
            {
                "uid": users.get_effective_uid(),
                "username": users.get_effective_username(),
                "gid": users.get_effective_gid(),
                "groupname": users.get_effective_groupname(),
            }
        )

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve a fixture file, or an empty directory for uid 0.

    This is the ``py-users-web`` console entry point.  The Flask
    debugger stays off unless ``--debug`` is given.
    """
    parser = argparse.ArgumentParser(description="Serve an identity directory as JSON")
    parser.add_argument("fixture", nargs="?", type=Path, help="JSON fixture file to serve")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--debug", action="store_true", help="run the Flask debugger")
    args = parser.parse_args(argv)

    users = load_users(args.fixture) if args.fixture is not None else MockUsers(0)
    app = create_app(users)
    app.run(debug=args.debug, port=args.port)
