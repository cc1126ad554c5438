from abc import ABC, abstractmethod

from app.domain.entities.booking import Booking


class BookingStorePort(ABC):
    @abstractmethod
    def insert(self, booking: Booking) -> None:
        """Persist a new booking. Must never overwrite an existing id."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        """Return every booking in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """Replace the stored record with the same id."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
