"""Flask REST API exposing the ledger store."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger.config import Settings
from ledger.exceptions import PersistenceError, RecordNotFoundError, ValidationError
from ledger.models import Category
from ledger.services import LedgerStore
from ledger.storage import FileStorage


def create_app(store: Optional[LedgerStore] = None, settings: Optional[Settings] = None) -> Flask:
    app = Flask(__name__)
    settings = settings or Settings.from_env()

    if settings.is_dev:
        CORS(app, resources={r"/*": {"origins": "*"}})
    elif settings.allowed_origins:
        CORS(app, resources={r"/*": {"origins": list(settings.allowed_origins)}})

    if store is None:
        store = LedgerStore(FileStorage(settings.data_dir))
    app.extensions["ledger_store"] = store

    def _success(payload: Any, status: int = 200):
        if status == 204:
            return ("", status)
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(RecordNotFoundError)
    def handle_not_found(exc: RecordNotFoundError):
        return _handle_error(exc, 404, "Record not found")

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(exc: PersistenceError):
        return _handle_error(exc, 500, "Persistence error")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/ledger")
    def ledger_snapshot():
        return _success(store.snapshot())

    @app.get("/entries/<category>")
    def list_entries(category: str):
        parsed = Category.parse(category)
        return _success({
            "items": [entry.to_dict() for entry in store.entries(parsed)],
            "total": f"{store.total(parsed):.2f}",
        })

    @app.post("/entries/<category>")
    def create_entry(category: str):
        parsed = Category.parse(category)
        payload = _json_body()
        entry = store.add(parsed, payload.get("description"), payload.get("amount"))
        return _success(entry.to_dict(), 201)

    @app.get("/entries/<category>/<int:entry_id>")
    def get_entry(category: str, entry_id: int):
        entry = store.get(Category.parse(category), entry_id)
        return _success(entry.to_dict())

    @app.delete("/entries/<category>/<int:entry_id>")
    def delete_entry(category: str, entry_id: int):
        store.remove_entry(Category.parse(category), entry_id)
        return _success({}, 204)

    @app.get("/summary")
    def summary():
        return _success(store.totals().to_dict())

    @app.post("/clear")
    def clear():
        payload = request.get_json(silent=True) or {}
        confirmed = isinstance(payload, dict) and payload.get("confirm") is True
        if not store.clear_all(lambda: confirmed):
            return _success({"cleared": False}, 409)
        return _success({}, 204)

    return app
