from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .service import ActionResult


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _respond(result: ActionResult):
    return jsonify({"message": result.message}), 201 if result.created else 200


def register(app: Flask, container: Container) -> None:
    records = container.record_service

    @app.route("/users/<record_id>", methods=["PATCH"], endpoint="apply_action")
    def apply_action(record_id: str):
        body = _body()
        return _respond(records.apply_action(record_id, body.get("action"), body))

    @app.route("/users/<record_id>/performance", methods=["PATCH"], endpoint="set_performance")
    def set_performance(record_id: str):
        return _respond(records.set_performance(record_id, _body()))

    @app.route("/users/<record_id>/communication/reset", methods=["PATCH"], endpoint="reset_communication")
    def reset_communication(record_id: str):
        return _respond(records.reset_communication(record_id, _body().get("date")))

    @app.route("/users/<record_id>/payroll/reset", methods=["PATCH"], endpoint="reset_payroll")
    def reset_payroll(record_id: str):
        return _respond(records.reset_payroll(record_id, _body().get("date")))

    @app.route("/users/<record_id>/performance/reset", methods=["PATCH"], endpoint="reset_performance")
    def reset_performance(record_id: str):
        return _respond(records.reset_performance(record_id, _body().get("date")))

    @app.route("/users/<record_id>/attendance/delete", methods=["PATCH"], endpoint="delete_day")
    def delete_day(record_id: str):
        return _respond(records.delete_day(record_id, _body().get("date")))
