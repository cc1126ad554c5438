from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities.identity import Identity


class TokenServicePort(ABC):
    @abstractmethod
    def issue(self, identity: Identity) -> str:
        raise NotImplementedError

    @abstractmethod
    def decode(self, token: str) -> dict[str, Any] | None:
        """Return the claims of a valid token, None if invalid or expired."""
        raise NotImplementedError
