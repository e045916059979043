"""An in-memory users service over HTTP."""

from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass
from typing import Any

from flask import Flask, jsonify, request

DEFAULT_PORT = 8000
NOT_FOUND = "Usuario no encontrado"
DELETED = "Usuario eliminado"


@dataclass
class _User:
    id: int
    name: str = ""
    age: str = ""
    location: str = ""


def _payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def _user_from(user_id: int, payload: dict[str, Any]) -> _User:
    return _User(
        id=user_id,
        name=_text(payload, "name"),
        age=_text(payload, "age"),
        location=_text(payload, "location"),
    )


def _parse_id(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def create_app() -> Flask:
    """Build the application with an empty list of users."""
    app = Flask(__name__)
    users: list[_User] = []

    def index_of(user_id: int) -> int | None:
        return next((index for index, user in enumerate(users) if user.id == user_id), None)

    def not_found():
        return jsonify({"Error": NOT_FOUND}), 404

    @app.post("/users")
    def create_user():
        user = _user_from(len(users) + 1, _payload())
        users.append(user)
        return jsonify(asdict(user))

    @app.put("/users/<user_id>")
    def update_user(user_id: str):
        identifier = _parse_id(user_id)
        index = index_of(identifier)
        if index is None:
            return not_found()
        del users[index]
        updated = _user_from(identifier, _payload())
        users.append(updated)
        return jsonify(asdict(updated))

    @app.delete("/users/<user_id>")
    def delete_user(user_id: str):
        index = index_of(_parse_id(user_id))
        if index is None:
            return not_found()
        del users[index]
        return jsonify({"Message": DELETED})

    @app.get("/users")
    def get_users():
        return jsonify([asdict(user) for user in users])

    @app.get("/users/<user_id>")
    def get_user(user_id: str):
        index = index_of(_parse_id(user_id))
        if index is None:
            return not_found()
        return jsonify(asdict(users[index]))

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve the users API."""
    parser = argparse.ArgumentParser(description="Serve the users API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)