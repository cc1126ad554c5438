from __future__ import annotations

from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking


class MemoryBookingStore(BookingStorePort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def insert(self, booking: Booking) -> None:
        if booking.id in self._bookings:
            raise ValueError(f"Booking id already exists: {booking.id}")
        self._bookings[booking.id] = booking

    def get(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_all(self) -> list[Booking]:
        return list(self._bookings.values())

    def update(self, booking: Booking) -> None:
        if booking.id not in self._bookings:
            raise KeyError(booking.id)
        self._bookings[booking.id] = booking

    def count(self) -> int:
        return len(self._bookings)
