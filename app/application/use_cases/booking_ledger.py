from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from app.application.exceptions import Internal, InvalidInput, NotFound
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.catalog import CatalogPort
from app.domain.entities.booking import Booking, BookingStatus, Customer, PaymentStatus
from app.domain.entities.stats import Stats
from app.domain.pricing import price_for_category


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _newest_first(bookings: list[Booking]) -> list[Booking]:
    # reversed() first so that equal timestamps keep the latest insert on top
    return sorted(reversed(bookings), key=lambda b: b.created_at, reverse=True)


class BookingLedger:
    """
    Authoritative collection of bookings.

    Creation, status changes and payment verification are serialized through
    a single lock so that concurrent requests cannot lose records or mint the
    same id twice. Every store failure, read or write, surfaces as Internal.

    Status transitions are permissive: any status may be set from any other.
    """

    def __init__(
        self,
        store: BookingStorePort,
        catalog: CatalogPort,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._clock = clock
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        customer: Customer,
        service_ref: str,
        technician_ref: str | None,
        scheduled_at: str,
        notes: str | None = None,
    ) -> Booking:
        for field_name in ("name", "email", "phone"):
            value = getattr(customer, field_name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidInput(f"customer.{field_name} is required")
        if not scheduled_at or not str(scheduled_at).strip():
            raise InvalidInput("scheduled_at is required")
        if not service_ref or not service_ref.strip():
            raise InvalidInput("service_ref is required")

        service = self._catalog.lookup_service(service_ref)
        if service is None:
            raise NotFound(f"Service '{service_ref}' not found")

        technician_ref = (technician_ref or "").strip() or None
        if technician_ref and self._catalog.lookup_technician(technician_ref) is None:
            raise NotFound(f"Technician '{technician_ref}' not found")

        amount = price_for_category(service.category)
        if amount is None:
            raise InvalidInput(f"No price configured for category '{service.category}'")

        with self._lock:
            booking = Booking(
                id=self._mint_id(),
                customer=customer,
                service_ref=service.id,
                technician_ref=technician_ref,
                scheduled_at=str(scheduled_at).strip(),
                amount=amount,
                status=BookingStatus.pending,
                payment_status=PaymentStatus.pending,
                notes=(notes or "").strip() or None,
                created_at=self._clock(),
            )
            try:
                self._store.insert(booking)
            except (OSError, ValueError, TypeError) as e:
                self._logger.exception("Booking insert failed", extra={"booking_id": booking.id})
                raise Internal(f"Failed to store booking: {e}") from e

        self._logger.info(
            "Booking created",
            extra={"booking_id": booking.id, "category": service.category, "email": customer.email},
        )
        return booking

    def get(self, booking_id: str) -> Booking:
        booking = self._read_one(booking_id)
        if booking is None:
            raise NotFound(f"Booking '{booking_id}' not found")
        return booking

    def list_by_customer(self, email: str) -> list[Booking]:
        needle = (email or "").strip().lower()
        if not needle:
            raise InvalidInput("email is required")
        matches = [b for b in self._read_all() if b.customer.email.lower() == needle]
        return _newest_first(matches)

    def list_all(self) -> list[Booking]:
        return _newest_first(self._read_all())

    def set_status(self, booking_id: str, status: str | BookingStatus) -> Booking:
        try:
            new_status = BookingStatus(status)
        except ValueError:
            raise InvalidInput(f"Unknown status '{status}'")

        with self._lock:
            current = self.get(booking_id)
            updated = replace(current, status=new_status)
            self._save(updated)

        self._logger.info(
            "Booking status changed",
            extra={"booking_id": booking_id, "status": new_status.value, "reason": f"from {current.status.value}"},
        )
        return updated

    def verify_payment(self, booking_id: str, payment_ref: str) -> Booking:
        payment_ref = (payment_ref or "").strip()
        if not payment_ref:
            raise InvalidInput("payment_ref is required")

        with self._lock:
            current = self.get(booking_id)
            updated = replace(
                current,
                status=BookingStatus.confirmed,
                payment_status=PaymentStatus.paid,
                payment_ref=payment_ref,
            )
            self._save(updated)

        self._logger.info(
            "Payment verified",
            extra={"booking_id": booking_id, "status": updated.status.value, "payment_status": updated.payment_status.value},
        )
        return updated

    def aggregate(self) -> Stats:
        """Fold the full ledger into counters. Recomputed on every call."""
        counts = {status: 0 for status in BookingStatus}
        total = 0
        revenue = 0
        for booking in self._read_all():
            total += 1
            counts[booking.status] += 1
            if booking.status == BookingStatus.completed:
                revenue += booking.amount

        return Stats(
            total_bookings=total,
            pending_bookings=counts[BookingStatus.pending],
            confirmed_bookings=counts[BookingStatus.confirmed],
            completed_bookings=counts[BookingStatus.completed],
            cancelled_bookings=counts[BookingStatus.cancelled],
            total_revenue=revenue,
        )

    def _mint_id(self) -> str:
        # Caller holds self._lock.
        while True:
            candidate = f"BK{uuid.uuid4().hex[:10].upper()}"
            if self._read_one(candidate) is None:
                return candidate

    def _read_one(self, booking_id: str) -> Booking | None:
        try:
            return self._store.get(booking_id)
        except (OSError, ValueError, TypeError) as e:
            self._logger.exception("Booking read failed", extra={"booking_id": booking_id})
            raise Internal(f"Failed to read booking: {e}") from e

    def _read_all(self) -> list[Booking]:
        try:
            return self._store.list_all()
        except (OSError, ValueError, TypeError) as e:
            self._logger.exception("Booking scan failed", extra={"reason": type(e).__name__})
            raise Internal(f"Failed to read bookings: {e}") from e

    def _save(self, booking: Booking) -> None:
        try:
            self._store.update(booking)
        except (OSError, ValueError, TypeError) as e:
            self._logger.exception("Booking update failed", extra={"booking_id": booking.id})
            raise Internal(f"Failed to update booking: {e}") from e
