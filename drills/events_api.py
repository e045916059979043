"""An in-memory events and tasks service over HTTP."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any

from flask import Flask, jsonify, request

DEFAULT_PORT = 8081
NOT_FOUND = "Event not found"


@dataclass
class _Event:
    id: str = ""
    title: str = ""
    description: str = ""

    def to_json(self) -> dict[str, str]:
        return {"ID": self.id, "Title": self.title, "Description": self.description}


@dataclass(frozen=True)
class _Task:
    id: str
    name: str
    content: str

    def to_json(self) -> dict[str, str]:
        return {"ID": self.id, "name": self.name, "content": self.content}


def _payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def create_app() -> Flask:
    """Build the application with its seed event and tasks."""
    app = Flask(__name__)
    app.url_map.strict_slashes = False

    events = [
        _Event(
            id="1",
            title="Welcome meetup",
            description=(
                "Come join us for a chance to learn how the service works "
                "and get to eventually try it out"
            ),
        )
    ]
    tasks = (
        _Task("111", "Task One", "some content"),
        _Task("222", "Task Two", "some content"),
    )

    def find(event_id: str) -> _Event | None:
        return next((event for event in events if event.id == event_id), None)

    def not_found():
        return jsonify({"error": NOT_FOUND}), 404

    @app.get("/")
    def home():
        return "Welcome home!"

    @app.post("/event")
    def create_event():
        payload = _payload()
        event = _Event(
            id=_text(payload, "ID"),
            title=_text(payload, "Title"),
            description=_text(payload, "Description"),
        )
        events.append(event)
        return jsonify(event.to_json()), 201

    @app.get("/events")
    def get_all_events():
        return jsonify([event.to_json() for event in events])

    @app.get("/tasks")
    def get_tasks():
        return jsonify([task.to_json() for task in tasks])

    @app.get("/events/<event_id>")
    def get_one_event(event_id: str):
        event = find(event_id)
        if event is None:
            return not_found()
        return jsonify(event.to_json())

    @app.put("/events/<event_id>")
    def update_event(event_id: str):
        event = find(event_id)
        if event is None:
            return not_found()
        payload = _payload()
        event.title = _text(payload, "Title")
        event.description = _text(payload, "Description")
        return jsonify(event.to_json())

    @app.delete("/events/<event_id>")
    def delete_event(event_id: str):
        remaining = [event for event in events if event.id != event_id]
        if len(remaining) == len(events):
            return not_found()
        events[:] = remaining
        return f"The event with ID {event_id} has been deleted successfully"

    return app


def main(argv: list[str] | None = None) -> None:
    """Serve the events API."""
    parser = argparse.ArgumentParser(description="Serve the events API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)