from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    customer = "customer"
    admin = "admin"


@dataclass(frozen=True)
class Identity:
    id: str
    name: str
    email: str
    role: Role = Role.customer
    phone: str | None = None


@dataclass(frozen=True)
class UserRecord:
    identity: Identity
    password_hash: str
