from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.service_catalog import ServiceEntry, Technician


class CatalogPort(ABC):
    @abstractmethod
    def lookup_service(self, service_ref: str) -> ServiceEntry | None:
        """Get service entry by id."""
        raise NotImplementedError

    @abstractmethod
    def lookup_technician(self, technician_ref: str) -> Technician | None:
        """Get technician by id. Used for display joins only."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[ServiceEntry]:
        raise NotImplementedError

    @abstractmethod
    def list_technicians(self, category: str | None = None) -> list[Technician]:
        """List technicians, optionally filtered by specialization."""
        raise NotImplementedError
