from dataclasses import dataclass


@dataclass(frozen=True)
class Stats:
    total_bookings: int = 0
    pending_bookings: int = 0
    confirmed_bookings: int = 0
    completed_bookings: int = 0
    cancelled_bookings: int = 0
    total_revenue: int = 0
