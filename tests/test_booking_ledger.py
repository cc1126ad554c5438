"""
Tests for booking creation, lookup, status changes and aggregation.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from app.application.exceptions import InvalidInput, NotFound
from app.application.use_cases.booking_ledger import BookingLedger
from app.domain.entities.booking import BookingStatus, Customer, PaymentStatus
from app.domain.pricing import PRICE_TABLE
from app.infrastructure.catalog.catalog_store import StaticCatalogStore
from app.infrastructure.store.memory_store import MemoryBookingStore


class StepClock:
    def __init__(self, start: datetime | None = None, step_seconds: int = 1) -> None:
        self._now = start or datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        self._step = timedelta(seconds=step_seconds)

    def __call__(self) -> datetime:
        current = self._now
        self._now = self._now + self._step
        return current


def _ledger(clock=None) -> tuple[BookingLedger, MemoryBookingStore]:
    store = MemoryBookingStore()
    ledger = BookingLedger(store=store, catalog=StaticCatalogStore(), clock=clock or StepClock())
    return ledger, store


def _customer(email: str = "asha@example.com") -> Customer:
    return Customer(name="Asha", email=email, phone="9876543210")


def test_create_sets_pending_and_price_from_category():
    ledger, store = _ledger()

    for service_ref, category in (
        ("svc-plumbing", "plumbing"),
        ("svc-electrical", "electrical"),
        ("svc-cleaning", "cleaning"),
        ("svc-painting", "painting"),
        ("svc-carpentry", "carpentry"),
        ("svc-ac", "ac"),
    ):
        booking = ledger.create(_customer(), service_ref, None, "2024-05-10 10:00")
        assert booking.status == BookingStatus.pending
        assert booking.payment_status == PaymentStatus.pending
        assert booking.amount == PRICE_TABLE[category]
        assert booking.created_at is not None
        assert booking.payment_ref is None

    assert store.count() == 6


def test_electrical_booking_costs_599():
    ledger, _ = _ledger()
    booking = ledger.create(_customer(), "svc-electrical", "tech-002", "2024-05-10 10:00", notes="Fan wobbles")
    assert booking.amount == 599
    assert booking.technician_ref == "tech-002"
    assert booking.notes == "Fan wobbles"


def test_ids_are_unique():
    ledger, _ = _ledger()
    ids = {ledger.create(_customer(), "svc-cleaning", None, "tomorrow").id for _ in range(50)}
    assert len(ids) == 50


def test_concurrent_creates_do_not_lose_bookings():
    ledger, store = _ledger()
    errors: list[Exception] = []

    def worker() -> None:
        try:
            for _ in range(20):
                ledger.create(_customer(), "svc-ac", None, "2024-06-01")
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert store.count() == 160
    assert len({b.id for b in store.list_all()}) == 160


@pytest.mark.parametrize("field_name", ["name", "email", "phone"])
def test_missing_customer_field_is_invalid_and_ledger_unchanged(field_name):
    ledger, store = _ledger()
    fields = {"name": "Asha", "email": "asha@example.com", "phone": "9876543210"}
    fields[field_name] = "   "

    with pytest.raises(InvalidInput):
        ledger.create(Customer(**fields), "svc-plumbing", None, "2024-05-10")

    assert store.count() == 0


def test_empty_email_is_invalid_input():
    ledger, store = _ledger()
    ledger.create(_customer(), "svc-plumbing", None, "2024-05-10")

    with pytest.raises(InvalidInput):
        ledger.create(_customer(email=""), "svc-plumbing", None, "2024-05-10")

    assert store.count() == 1


def test_missing_schedule_is_invalid_input():
    ledger, _ = _ledger()
    with pytest.raises(InvalidInput):
        ledger.create(_customer(), "svc-plumbing", None, "")


def test_unknown_service_is_not_found():
    ledger, store = _ledger()
    with pytest.raises(NotFound):
        ledger.create(_customer(), "svc-gardening", None, "2024-05-10")
    assert store.count() == 0


def test_unknown_technician_is_not_found():
    ledger, store = _ledger()
    with pytest.raises(NotFound):
        ledger.create(_customer(), "svc-plumbing", "tech-999", "2024-05-10")
    assert store.count() == 0


def test_get_unknown_id_is_not_found():
    ledger, _ = _ledger()
    with pytest.raises(NotFound):
        ledger.get("BK-DOES-NOT-EXIST")


def test_list_by_customer_newest_first():
    ledger, _ = _ledger()
    first = ledger.create(_customer(), "svc-plumbing", None, "2024-05-10")
    ledger.create(_customer("someone@else.com"), "svc-cleaning", None, "2024-05-11")
    second = ledger.create(_customer(), "svc-painting", None, "2024-05-12")
    third = ledger.create(_customer(), "svc-ac", None, "2024-05-13")

    bookings = ledger.list_by_customer("ASHA@example.com")

    assert [b.id for b in bookings] == [third.id, second.id, first.id]
    stamps = [b.created_at for b in bookings]
    assert all(a >= b for a, b in zip(stamps, stamps[1:]))


def test_list_by_customer_same_timestamp_keeps_latest_on_top():
    fixed = datetime(2024, 5, 1, tzinfo=timezone.utc)
    ledger, _ = _ledger(clock=lambda: fixed)
    first = ledger.create(_customer(), "svc-plumbing", None, "2024-05-10")
    second = ledger.create(_customer(), "svc-plumbing", None, "2024-05-10")

    assert [b.id for b in ledger.list_by_customer("asha@example.com")] == [second.id, first.id]


def test_list_by_customer_unknown_email_is_empty():
    ledger, _ = _ledger()
    ledger.create(_customer(), "svc-plumbing", None, "2024-05-10")
    assert ledger.list_by_customer("nobody@example.com") == []


def test_set_status_allows_any_transition():
    ledger, _ = _ledger()
    booking = ledger.create(_customer(), "svc-carpentry", None, "2024-05-10")

    assert ledger.set_status(booking.id, "completed").status == BookingStatus.completed
    assert ledger.set_status(booking.id, "pending").status == BookingStatus.pending
    assert ledger.set_status(booking.id, BookingStatus.cancelled).status == BookingStatus.cancelled
    assert ledger.get(booking.id).status == BookingStatus.cancelled
    assert ledger.get(booking.id).amount == 699


def test_set_status_rejects_unknown_value():
    ledger, _ = _ledger()
    booking = ledger.create(_customer(), "svc-carpentry", None, "2024-05-10")
    with pytest.raises(InvalidInput):
        ledger.set_status(booking.id, "archived")


def test_set_status_unknown_id_is_not_found():
    ledger, _ = _ledger()
    with pytest.raises(NotFound):
        ledger.set_status("BK-NOPE", "completed")


def test_verify_payment_confirms_and_is_idempotent():
    ledger, _ = _ledger()
    booking = ledger.create(_customer(), "svc-painting", None, "2024-05-10")
    ledger.set_status(booking.id, "cancelled")

    once = ledger.verify_payment(booking.id, "pay_123")
    twice = ledger.verify_payment(booking.id, "pay_123")

    for result in (once, twice):
        assert result.status == BookingStatus.confirmed
        assert result.payment_status == PaymentStatus.paid
        assert result.payment_ref == "pay_123"
    assert twice.created_at == booking.created_at


def test_verify_payment_requires_reference():
    ledger, _ = _ledger()
    booking = ledger.create(_customer(), "svc-painting", None, "2024-05-10")
    with pytest.raises(InvalidInput):
        ledger.verify_payment(booking.id, "  ")


def test_verify_payment_unknown_id_is_not_found():
    ledger, _ = _ledger()
    with pytest.raises(NotFound):
        ledger.verify_payment("BK-NOPE", "pay_1")


def test_aggregate_counts_and_completed_revenue():
    ledger, store = _ledger()
    electrical = ledger.create(_customer(), "svc-electrical", None, "2024-05-10")
    ledger.set_status(electrical.id, "completed")

    stats = ledger.aggregate()
    assert stats.completed_bookings == 1
    assert stats.total_revenue == 599

    paid = ledger.create(_customer(), "svc-painting", None, "2024-05-11")
    ledger.verify_payment(paid.id, "pay_9")
    cancelled = ledger.create(_customer(), "svc-ac", None, "2024-05-12")
    ledger.set_status(cancelled.id, "cancelled")
    ledger.create(_customer(), "svc-cleaning", None, "2024-05-13")

    stats = ledger.aggregate()
    assert stats.total_bookings == store.count() == 4
    assert stats.pending_bookings == 1
    assert stats.confirmed_bookings == 1
    assert stats.completed_bookings == 1
    assert stats.cancelled_bookings == 1
    # paid-but-not-completed bookings do not count as revenue
    assert stats.total_revenue == 599


def test_aggregate_on_empty_ledger():
    ledger, _ = _ledger()
    stats = ledger.aggregate()
    assert stats.total_bookings == 0
    assert stats.total_revenue == 0
