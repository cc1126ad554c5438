from fastapi import APIRouter, Depends

from app.api.v1.errors import to_http
from app.api.v1.schemas import (
    BookingSchema,
    CreateOrderRequestSchema,
    PaymentOrderSchema,
    VerifyPaymentRequestSchema,
)
from app.application.exceptions import BookingError
from app.application.use_cases.payments import PaymentStubUseCase
from app.wiring.dependencies import get_payment_use_case

router = APIRouter()


@router.post("/create-order", response_model=PaymentOrderSchema)
def create_order(
    req: CreateOrderRequestSchema,
    uc: PaymentStubUseCase = Depends(get_payment_use_case),
):
    try:
        order = uc.create_order(req.booking_id)
    except BookingError as e:
        raise to_http(e)
    return PaymentOrderSchema(
        order_id=order.order_id,
        booking_id=order.booking_id,
        amount=order.amount,
        currency=order.currency,
    )


@router.post("/verify", response_model=BookingSchema)
def verify_payment(
    req: VerifyPaymentRequestSchema,
    uc: PaymentStubUseCase = Depends(get_payment_use_case),
):
    try:
        return BookingSchema.from_entity(uc.verify(req.booking_id, req.payment_ref))
    except BookingError as e:
        raise to_http(e)
