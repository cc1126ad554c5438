from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


class PaymentStatus(str, Enum):
    pending = "pending"
    paid = "paid"


@dataclass(frozen=True)
class Customer:
    name: str
    email: str
    phone: str

    @staticmethod
    def from_payload(name: str | None, email: str | None, phone: str | None) -> "Customer":
        return Customer(
            name=(name or "").strip(),
            email=(email or "").strip().lower(),
            phone=(phone or "").strip(),
        )


@dataclass(frozen=True)
class Booking:
    id: str
    customer: Customer
    service_ref: str
    technician_ref: str | None
    scheduled_at: str
    amount: int
    created_at: datetime
    status: BookingStatus = BookingStatus.pending
    payment_status: PaymentStatus = PaymentStatus.pending
    payment_ref: str | None = None
    notes: str | None = None
