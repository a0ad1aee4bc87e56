from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_number(value: Any, message: str) -> float:
    # bool is an int subclass; a JSON true/false is not a score.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message)
    return value


def require_json_object(value: Any, message: str = "JSON object body required") -> dict:
    if not isinstance(value, dict):
        raise ValidationError(message)
    return value
