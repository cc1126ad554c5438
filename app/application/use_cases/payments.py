from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from app.application.use_cases.booking_ledger import BookingLedger
from app.domain.entities.booking import Booking


@dataclass(frozen=True)
class PaymentOrder:
    order_id: str
    booking_id: str
    amount: int
    currency: str


class PaymentStubUseCase:
    """Stand-in for a payment gateway: mints order ids and confirms on verify."""

    def __init__(self, ledger: BookingLedger, currency: str = "INR") -> None:
        self._ledger = ledger
        self._currency = currency
        self._logger = logging.getLogger(__name__)

    def create_order(self, booking_id: str) -> PaymentOrder:
        booking = self._ledger.get(booking_id)
        order = PaymentOrder(
            order_id=f"order_{uuid.uuid4().hex[:14]}",
            booking_id=booking.id,
            amount=booking.amount,
            currency=self._currency,
        )
        self._logger.info("Payment order created (stub)", extra={"booking_id": booking.id})
        return order

    def verify(self, booking_id: str, payment_ref: str) -> Booking:
        return self._ledger.verify_payment(booking_id, payment_ref)
