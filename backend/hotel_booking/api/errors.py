"""
Boundary mapping from booking engine errors to HTTP responses.

STATUS_BY_KIND must name every BookingErrorKind. A kind missing here makes
the handler raise KeyError, which Starlette turns into a traceback page
with DEBUG on and a bare 500 otherwise.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from hotel_booking.core.exceptions import BookingError, BookingErrorKind
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_KIND = {
    BookingErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingErrorKind.CANNOT_LIST_HOTELS: status.HTTP_403_FORBIDDEN,
    BookingErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    BookingErrorKind.FULL_ROOM: status.HTTP_403_FORBIDDEN,
}


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    logger.debug("booking_error_mapped", kind=exc.kind.value, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind.value},
    )
