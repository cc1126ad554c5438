from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.exceptions import InvalidCredentials, InvalidInput
from app.application.ports.identity_store import IdentityStorePort
from app.application.ports.token_service import TokenServicePort
from app.domain.entities.identity import Identity, Role

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True)
class LoginResult:
    token: str
    identity: Identity


class LoginUseCase:
    def __init__(self, identities: IdentityStorePort, tokens: TokenServicePort) -> None:
        self._identities = identities
        self._tokens = tokens
        self._logger = logging.getLogger(__name__)

    def login(self, identifier: str, password: str) -> LoginResult:
        identifier = (identifier or "").strip()
        if not identifier or not password:
            raise InvalidInput("identifier and password are required")

        identity = self._identities.verify(identifier, password)
        if identity is None:
            self._logger.info("Login rejected", extra={"email": identifier, "reason": "bad_credentials"})
            raise InvalidCredentials("Invalid credentials")

        return LoginResult(token=self._tokens.issue(identity), identity=identity)

    def register(self, name: str, email: str, password: str, phone: str | None = None) -> LoginResult:
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name or not email:
            raise InvalidInput("name and email are required")
        if "@" not in email:
            raise InvalidInput("email is malformed")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"password must be at least {MIN_PASSWORD_LENGTH} characters")

        identity = self._identities.register(
            name=name,
            email=email,
            password=password,
            phone=(phone or "").strip() or None,
            role=Role.customer,
        )
        self._logger.info("User registered", extra={"email": email})
        return LoginResult(token=self._tokens.issue(identity), identity=identity)

    def resolve(self, token: str) -> Identity:
        claims = self._tokens.decode(token)
        if not claims:
            raise InvalidCredentials("Invalid or expired token")
        identity = self._identities.get(str(claims.get("sub", "")))
        if identity is None:
            raise InvalidCredentials("Unknown user")
        return identity
