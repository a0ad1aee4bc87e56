from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/jwt", methods=["POST"], endpoint="issue_token")
    def issue_token():
        claims = require_json_object(request.get_json(silent=True))
        return jsonify({"token": container.token_service.issue(claims)})
