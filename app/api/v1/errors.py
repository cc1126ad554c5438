from fastapi import HTTPException

from app.application.exceptions import BookingError

STATUS_BY_CODE = {
    "invalid_input": 400,
    "unauthorized": 401,
    "not_found": 404,
    "conflict": 409,
    "internal": 500,
}


def to_http(error: BookingError) -> HTTPException:
    return HTTPException(
        status_code=STATUS_BY_CODE.get(error.code, 500),
        detail={"error": error.code, "message": error.message},
    )
