from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, StoreError

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int):
    return jsonify({"message": message}), status_code


def register_error_handlers(app: Flask) -> None:
    """Render every failure as a JSON `{"message": ...}` body."""

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        logger.error("store failure: %s", e, exc_info=e.__cause__ or e)
        return error_response("Internal server error", 500)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error")
        return error_response("Internal server error", 500)
