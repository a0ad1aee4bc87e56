from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/feedback", methods=["GET"], endpoint="daily_feedback")
    def daily_feedback():
        rows = container.feedback_service.daily_feedback(request.args.get("email"))
        return jsonify({"dailyFeedback": rows})
