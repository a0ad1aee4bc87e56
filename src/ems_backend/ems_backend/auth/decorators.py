from __future__ import annotations

from functools import wraps

from flask import g, request

from .token import TokenService, bearer_token


def token_required(tokens: TokenService):
    """Verify the bearer token and expose its claims as `g.identity`."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.identity = tokens.verify(bearer_token(request.headers.get("Authorization")))
            return view(*args, **kwargs)

        return wrapper

    return decorator
