from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities.booking import Booking, BookingStatus, PaymentStatus
from app.domain.entities.identity import Identity, Role
from app.domain.entities.service_catalog import ServiceEntry, Technician
from app.domain.entities.stats import Stats


class SubServiceSchema(BaseModel):
    name: str
    description: str | None = None
    price: str | None = None
    duration: str | None = None


class ServiceSchema(BaseModel):
    id: str
    title: str
    description: str
    icon: str
    category: str
    price: str
    border_color: str
    subservices: list[SubServiceSchema] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: ServiceEntry) -> "ServiceSchema":
        return cls(
            id=entry.id,
            title=entry.title,
            description=entry.description,
            icon=entry.icon,
            category=entry.category,
            price=entry.price,
            border_color=entry.border_color,
            subservices=[
                SubServiceSchema(name=s.name, description=s.description, price=s.price, duration=s.duration)
                for s in entry.subservices
            ],
        )


class TechnicianSchema(BaseModel):
    id: str
    name: str
    specialization: str
    experience_years: int = 0
    rating: float | None = None
    phone: str | None = None

    @classmethod
    def from_entry(cls, entry: Technician) -> "TechnicianSchema":
        return cls(
            id=entry.id,
            name=entry.name,
            specialization=entry.specialization,
            experience_years=entry.experience_years,
            rating=entry.rating,
            phone=entry.phone,
        )


class CustomerSchema(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""


class CreateBookingRequestSchema(BaseModel):
    customer: CustomerSchema
    service_ref: str
    technician_ref: str | None = None
    scheduled_at: str
    notes: str | None = None


class BookingSchema(BaseModel):
    id: str
    customer: CustomerSchema
    service_ref: str
    technician_ref: str | None = None
    scheduled_at: str
    notes: str | None = None
    amount: int
    status: BookingStatus
    payment_status: PaymentStatus
    payment_ref: str | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            id=booking.id,
            customer=CustomerSchema(
                name=booking.customer.name,
                email=booking.customer.email,
                phone=booking.customer.phone,
            ),
            service_ref=booking.service_ref,
            technician_ref=booking.technician_ref,
            scheduled_at=booking.scheduled_at,
            notes=booking.notes,
            amount=booking.amount,
            status=booking.status,
            payment_status=booking.payment_status,
            payment_ref=booking.payment_ref,
            created_at=booking.created_at,
        )


class BookingListSchema(BaseModel):
    count: int
    data: list[BookingSchema]


class SetStatusRequestSchema(BaseModel):
    status: str


class CreateOrderRequestSchema(BaseModel):
    booking_id: str


class PaymentOrderSchema(BaseModel):
    order_id: str
    booking_id: str
    amount: int
    currency: str


class VerifyPaymentRequestSchema(BaseModel):
    booking_id: str
    payment_ref: str


class StatsSchema(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    completed_bookings: int
    cancelled_bookings: int
    total_revenue: int

    @classmethod
    def from_entity(cls, stats: Stats) -> "StatsSchema":
        return cls(
            total_bookings=stats.total_bookings,
            pending_bookings=stats.pending_bookings,
            confirmed_bookings=stats.confirmed_bookings,
            completed_bookings=stats.completed_bookings,
            cancelled_bookings=stats.cancelled_bookings,
            total_revenue=stats.total_revenue,
        )


class RegisterRequestSchema(BaseModel):
    name: str
    email: str
    password: str
    phone: str | None = None


class LoginRequestSchema(BaseModel):
    identifier: str  # email or user name
    password: str


class IdentitySchema(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    phone: str | None = None

    @classmethod
    def from_entity(cls, identity: Identity) -> "IdentitySchema":
        return cls(
            id=identity.id,
            name=identity.name,
            email=identity.email,
            role=identity.role,
            phone=identity.phone,
        )


class TokenResponseSchema(BaseModel):
    token: str
    token_type: str = "bearer"
    user: IdentitySchema
