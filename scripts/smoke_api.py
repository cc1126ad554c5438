#!/usr/bin/env python3
"""Smoke test for a running booking API (uvicorn app.main:app --port 8001)."""

import os
import sys

import httpx


BASE_URL = os.environ.get("BASE_URL", "http://127.0.0.1:8001")
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@homefix.local")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")


def create_booking(client: httpx.Client) -> str | None:
    print("=" * 60)
    print("POST /api/bookings")
    print("=" * 60)

    payload = {
        "customer": {"name": "Smoke Test", "email": "smoke@example.com", "phone": "9000000000"},
        "service_ref": "svc-electrical",
        "scheduled_at": "2024-12-01 10:00",
        "notes": "Switch board sparks",
    }
    try:
        response = client.post("/api/bookings", json=payload)
        response.raise_for_status()
        data = response.json()
        print(f"✅ Booking {data['id']} amount={data['amount']} status={data['status']}")
        return data["id"]
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return None


def pay_and_complete(client: httpx.Client, booking_id: str) -> bool:
    print("\n" + "=" * 60)
    print("Payment stub + admin status change")
    print("=" * 60)

    try:
        order = client.post("/api/payments/create-order", json={"booking_id": booking_id})
        order.raise_for_status()
        order_id = order.json()["order_id"]
        verified = client.post("/api/payments/verify", json={"booking_id": booking_id, "payment_ref": order_id})
        verified.raise_for_status()
        print(f"✅ Paid: status={verified.json()['status']} payment_status={verified.json()['payment_status']}")

        login = client.post("/api/auth/login", json={"identifier": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        login.raise_for_status()
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        done = client.put(f"/api/bookings/{booking_id}/status", json={"status": "completed"}, headers=headers)
        done.raise_for_status()

        stats = client.get("/api/admin/stats", headers=headers)
        stats.raise_for_status()
        print(f"✅ Stats: {stats.json()}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False


def main() -> int:
    with httpx.Client(base_url=BASE_URL, timeout=10.0) as client:
        booking_id = create_booking(client)
        if not booking_id:
            return 1
        return 0 if pay_and_complete(client, booking_id) else 1


if __name__ == "__main__":
    sys.exit(main())
