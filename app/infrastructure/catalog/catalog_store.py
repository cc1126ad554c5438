from __future__ import annotations

from app.application.ports.catalog import CatalogPort
from app.domain.entities.service_catalog import ServiceEntry, Technician
from app.infrastructure.catalog.catalog_data import SERVICES, TECHNICIANS


class StaticCatalogStore(CatalogPort):
    def __init__(
        self,
        services: dict[str, ServiceEntry] | None = None,
        technicians: dict[str, Technician] | None = None,
    ) -> None:
        self._services = services if services is not None else SERVICES
        self._technicians = technicians if technicians is not None else TECHNICIANS

    def lookup_service(self, service_ref: str) -> ServiceEntry | None:
        normalized_ref = (service_ref or "").lower().strip()
        return self._services.get(normalized_ref)

    def lookup_technician(self, technician_ref: str) -> Technician | None:
        normalized_ref = (technician_ref or "").lower().strip()
        return self._technicians.get(normalized_ref)

    def list_services(self) -> list[ServiceEntry]:
        return list(self._services.values())

    def list_technicians(self, category: str | None = None) -> list[Technician]:
        technicians = list(self._technicians.values())
        if category:
            wanted = category.lower().strip()
            technicians = [t for t in technicians if t.specialization == wanted]
        return technicians
