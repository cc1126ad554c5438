from fastapi import APIRouter, Depends

from app.api.v1.schemas import BookingListSchema, BookingSchema, StatsSchema
from app.application.use_cases.booking_ledger import BookingLedger
from app.domain.entities.identity import Identity
from app.wiring.dependencies import get_booking_ledger, require_admin

router = APIRouter()


@router.get("/stats", response_model=StatsSchema)
def get_stats(
    ledger: BookingLedger = Depends(get_booking_ledger),
    _admin: Identity = Depends(require_admin),
):
    return StatsSchema.from_entity(ledger.aggregate())


@router.get("/bookings", response_model=BookingListSchema)
def list_all_bookings(
    ledger: BookingLedger = Depends(get_booking_ledger),
    _admin: Identity = Depends(require_admin),
):
    bookings = ledger.list_all()
    return BookingListSchema(count=len(bookings), data=[BookingSchema.from_entity(b) for b in bookings])
