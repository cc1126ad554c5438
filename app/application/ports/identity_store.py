from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.identity import Identity, Role


class IdentityStorePort(ABC):
    @abstractmethod
    def verify(self, identifier: str, password: str) -> Identity | None:
        """
        Check credentials. `identifier` is an email or a user name.
        Returns the identity on success, None otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def register(
        self,
        name: str,
        email: str,
        password: str,
        phone: str | None = None,
        role: Role = Role.customer,
    ) -> Identity:
        """Create a user. Raises Conflict if the email is already registered."""
        raise NotImplementedError

    @abstractmethod
    def get(self, user_id: str) -> Identity | None:
        raise NotImplementedError
