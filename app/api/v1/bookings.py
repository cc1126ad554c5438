from fastapi import APIRouter, Depends, Query

from app.api.v1.errors import to_http
from app.api.v1.schemas import (
    BookingListSchema,
    BookingSchema,
    CreateBookingRequestSchema,
    SetStatusRequestSchema,
)
from app.application.exceptions import BookingError
from app.application.use_cases.booking_ledger import BookingLedger
from app.domain.entities.booking import Customer
from app.domain.entities.identity import Identity
from app.wiring.dependencies import get_booking_ledger, require_admin

router = APIRouter()


@router.post("", response_model=BookingSchema, status_code=201)
def create_booking(
    req: CreateBookingRequestSchema,
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    try:
        booking = ledger.create(
            customer=Customer.from_payload(req.customer.name, req.customer.email, req.customer.phone),
            service_ref=req.service_ref,
            technician_ref=req.technician_ref,
            scheduled_at=req.scheduled_at,
            notes=req.notes,
        )
    except BookingError as e:
        raise to_http(e)
    return BookingSchema.from_entity(booking)


@router.get("", response_model=BookingListSchema)
def list_bookings_by_customer(
    email: str = Query(...),
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    try:
        bookings = ledger.list_by_customer(email)
    except BookingError as e:
        raise to_http(e)
    return BookingListSchema(count=len(bookings), data=[BookingSchema.from_entity(b) for b in bookings])


@router.get("/{booking_id}", response_model=BookingSchema)
def get_booking(
    booking_id: str,
    ledger: BookingLedger = Depends(get_booking_ledger),
):
    try:
        return BookingSchema.from_entity(ledger.get(booking_id))
    except BookingError as e:
        raise to_http(e)


@router.put("/{booking_id}/status", response_model=BookingSchema)
def set_booking_status(
    booking_id: str,
    req: SetStatusRequestSchema,
    ledger: BookingLedger = Depends(get_booking_ledger),
    _admin: Identity = Depends(require_admin),
):
    try:
        return BookingSchema.from_entity(ledger.set_status(booking_id, req.status))
    except BookingError as e:
        raise to_http(e)
