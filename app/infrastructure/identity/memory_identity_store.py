from __future__ import annotations

import threading
import uuid

from app.application.exceptions import Conflict
from app.application.ports.identity_store import IdentityStorePort
from app.domain.entities.identity import Identity, Role, UserRecord
from app.infrastructure.auth.passwords import hash_password, verify_password


class MemoryIdentityStore(IdentityStorePort):
    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def verify(self, identifier: str, password: str) -> Identity | None:
        needle = (identifier or "").strip().lower()
        records = list(self._users.values())
        # an email match wins over a name match
        record = next((r for r in records if r.identity.email == needle), None)
        if record is None:
            record = next((r for r in records if r.identity.name.lower() == needle), None)
        if record is None or not verify_password(password, record.password_hash):
            return None
        return record.identity

    def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: str | None = None,
        role: Role = Role.customer,
    ) -> Identity:
        email = email.strip().lower()
        with self._lock:
            if any(r.identity.email == email for r in self._users.values()):
                raise Conflict(f"Email '{email}' is already registered")
            if any(r.identity.name.lower() == name.strip().lower() for r in self._users.values()):
                raise Conflict(f"Name '{name.strip()}' is already registered")
            identity = Identity(
                id=uuid.uuid4().hex,
                name=name.strip(),
                email=email,
                role=role,
                phone=phone,
            )
            self._users[identity.id] = UserRecord(identity=identity, password_hash=hash_password(password))
        return identity

    def get(self, user_id: str) -> Identity | None:
        record = self._users.get(user_id)
        return record.identity if record else None
