from __future__ import annotations

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking, BookingStatus, Customer, PaymentStatus


class JsonBookingStore(BookingStorePort):
    """Keeps the whole ledger in one JSON document, rewritten atomically on every change."""

    def __init__(self, data_dir: str = "./data", file_name: str = "bookings.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / file_name
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _load(self) -> dict[str, Any]:
        """Load ledger document, return an empty one if the file is missing."""
        if not self._file_path.exists():
            return {"version": 1, "bookings": []}

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            self._logger.error("Booking file is corrupted", extra={"reason": str(self._file_path)})
            raise

        if "version" not in data:
            data["version"] = 1
        data.setdefault("bookings", [])
        return data

    def _save(self, data: dict[str, Any]) -> None:
        """Save ledger document atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def _serialize(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "customer": {
                "name": booking.customer.name,
                "email": booking.customer.email,
                "phone": booking.customer.phone,
            },
            "service_ref": booking.service_ref,
            "technician_ref": booking.technician_ref,
            "scheduled_at": booking.scheduled_at,
            "notes": booking.notes,
            "amount": booking.amount,
            "status": booking.status.value,
            "payment_status": booking.payment_status.value,
            "payment_ref": booking.payment_ref,
            "created_at": booking.created_at.isoformat(),
        }

    def _deserialize(self, data: dict[str, Any]) -> Booking:
        customer = data.get("customer") or {}
        if not data.get("created_at"):
            raise ValueError(f"Booking {data.get('id')} has no created_at")

        return Booking(
            id=data["id"],
            customer=Customer(
                name=customer.get("name", ""),
                email=customer.get("email", ""),
                phone=customer.get("phone", ""),
            ),
            service_ref=data["service_ref"],
            technician_ref=data.get("technician_ref"),
            scheduled_at=data.get("scheduled_at", ""),
            amount=int(data.get("amount", 0)),
            status=BookingStatus(data.get("status", "pending")),
            payment_status=PaymentStatus(data.get("payment_status", "pending")),
            payment_ref=data.get("payment_ref"),
            notes=data.get("notes"),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def insert(self, booking: Booking) -> None:
        with self._lock:
            data = self._load()
            if any(row.get("id") == booking.id for row in data["bookings"]):
                raise ValueError(f"Booking id already exists: {booking.id}")
            data["bookings"].append(self._serialize(booking))
            self._save(data)

    def get(self, booking_id: str) -> Booking | None:
        with self._lock:
            data = self._load()
        for row in data["bookings"]:
            if row.get("id") == booking_id:
                return self._deserialize(row)
        return None

    def list_all(self) -> list[Booking]:
        with self._lock:
            data = self._load()
        return [self._deserialize(row) for row in data["bookings"]]

    def update(self, booking: Booking) -> None:
        with self._lock:
            data = self._load()
            rows = data["bookings"]
            for index, row in enumerate(rows):
                if row.get("id") == booking.id:
                    rows[index] = self._serialize(booking)
                    self._save(data)
                    return
        raise KeyError(booking.id)

    def count(self) -> int:
        with self._lock:
            return len(self._load()["bookings"])
