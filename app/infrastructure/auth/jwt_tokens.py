from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.application.ports.token_service import TokenServicePort
from app.domain.entities.identity import Identity

ALGORITHM = "HS256"


class JwtTokenService(TokenServicePort):
    def __init__(self, secret: str, ttl_minutes: int = 60 * 24) -> None:
        if not secret:
            raise ValueError("AUTH_SECRET_KEY is required to sign tokens")
        self._secret = secret
        self._ttl = timedelta(minutes=ttl_minutes)
        self._logger = logging.getLogger(__name__)

    def issue(self, identity: Identity) -> str:
        now = datetime.now(tz=timezone.utc)
        payload: dict[str, Any] = {
            "sub": identity.id,
            "email": identity.email,
            "role": identity.role.value,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            self._logger.info("Token expired", extra={"reason": "expired"})
            return None
        except jwt.InvalidTokenError:
            return None
