from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..auth.decorators import token_required
from ..container import Container
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/users", methods=["GET"], endpoint="list_users")
    def list_users():
        email = request.args.get("email")
        if email:
            return jsonify(service.get_by_email(email).to_json()), 200
        return jsonify([r.to_json() for r in service.list_all()]), 200

    @app.route("/users/admin/<email>", methods=["GET"], endpoint="admin_check")
    @token_required(container.token_service)
    def admin_check(email: str):
        try:
            is_admin = service.is_admin(requester_email=g.identity.get("email"), email=email)
        except AuthorizationError:
            return jsonify({"isAdmin": False}), 403
        return jsonify({"isAdmin": is_admin})

    @app.route("/users", methods=["POST"], endpoint="register_user")
    def register_user():
        result = service.register(request.get_json(silent=True))
        return (
            jsonify(
                {
                    "message": "User created",
                    "insertedId": result.inserted_id,
                    "employeeId": result.employee_id,
                }
            ),
            201,
        )
