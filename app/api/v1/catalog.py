from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.v1.schemas import ServiceSchema, TechnicianSchema
from app.application.ports.catalog import CatalogPort
from app.wiring.dependencies import get_catalog

router = APIRouter()


@router.get("/services", response_model=list[ServiceSchema])
def list_services(catalog: CatalogPort = Depends(get_catalog)):
    return [ServiceSchema.from_entry(s) for s in catalog.list_services()]


@router.get("/services/{service_id}", response_model=ServiceSchema)
def get_service(service_id: str, catalog: CatalogPort = Depends(get_catalog)):
    entry = catalog.lookup_service(service_id)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail={"error": "not_found", "message": f"Service '{service_id}' not found"},
        )
    return ServiceSchema.from_entry(entry)


@router.get("/technicians", response_model=list[TechnicianSchema])
def list_technicians(
    category: str | None = Query(None),
    catalog: CatalogPort = Depends(get_catalog),
):
    return [TechnicianSchema.from_entry(t) for t in catalog.list_technicians(category)]
