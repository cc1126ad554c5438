from __future__ import annotations

from app.domain.pricing import PRICE_TABLE, price_for_category
from app.infrastructure.catalog.catalog_store import StaticCatalogStore


def test_service_lookup_is_case_insensitive():
    catalog = StaticCatalogStore()

    entry = catalog.lookup_service("  SVC-Electrical ")
    assert entry is not None
    assert entry.category == "electrical"
    assert entry.price == "₹599 onwards"
    assert len(entry.subservices) == 4


def test_unknown_refs_return_none():
    catalog = StaticCatalogStore()
    assert catalog.lookup_service("svc-roofing") is None
    assert catalog.lookup_technician("tech-404") is None


def test_every_service_category_has_a_price():
    catalog = StaticCatalogStore()
    categories = {s.category for s in catalog.list_services()}
    assert categories == set(PRICE_TABLE)
    assert len(catalog.list_services()) == 6


def test_price_table():
    assert price_for_category("electrical") == 599
    assert price_for_category(" Plumbing ") == 499
    assert price_for_category("cleaning") == 399
    assert price_for_category("painting") == 899
    assert price_for_category("carpentry") == 699
    assert price_for_category("ac") == 499
    assert price_for_category("gardening") is None


def test_technicians_filter_by_specialization():
    catalog = StaticCatalogStore()

    electricians = catalog.list_technicians("Electrical")
    assert {t.id for t in electricians} == {"tech-002", "tech-007"}
    assert len(catalog.list_technicians()) == 7
    assert catalog.list_technicians("roofing") == []
