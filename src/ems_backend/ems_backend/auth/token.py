from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Mapping, Optional

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import TOKEN_ALGORITHM, TOKEN_EXPIRY_DAYS
from ..core.exceptions import AuthenticationError, TokenInvalidError

logger = logging.getLogger(__name__)


class TokenService:
    """Identity Gate: signs arbitrary identity claims and verifies them back.

    Tokens expire after a fixed lifetime and cannot be revoked.
    """

    def __init__(self, secret: str, *, expires_in: timedelta = timedelta(days=TOKEN_EXPIRY_DAYS)):
        self._secret = secret
        self._expires_in = expires_in

    def issue(self, claims: Mapping[str, Any]) -> str:
        payload = dict(claims)
        payload["exp"] = now_utc() + self._expires_in
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: Optional[str]) -> dict[str, Any]:
        if token is None:
            raise AuthenticationError("Unauthorized")
        try:
            return jwt.decode(token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.PyJWTError as e:
            logger.info("rejected token: %s", e)
            raise TokenInvalidError("Forbidden") from e


def bearer_token(header: Optional[str]) -> Optional[str]:
    """Extract the token from an `Authorization: Bearer <token>` header."""
    if not header:
        return None
    parts = header.split()
    # A header without a token part is a presented-but-invalid credential.
    return parts[1] if len(parts) > 1 else ""
