"""
Shared route dependencies: store wiring and request-shape validation.

Malformed ids are rejected here with 400 so they never reach the booking
engine. FastAPI's default for body/path validation would be 422.
"""

from typing import Any

from fastapi import Depends, HTTPException, Request, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.db.session import get_db
from hotel_booking.infrastructure.sql_booking_store import SqlBookingStore
from hotel_booking.schemas.booking import RoomSelection, RowId
from hotel_booking.services.interfaces.booking_store import BookingStore

_row_id = TypeAdapter(RowId)


def get_booking_store(db: AsyncSession = Depends(get_db)) -> BookingStore:
    return SqlBookingStore(db)


def _bad_request(detail: Any) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def parse_room_selection(request: Request) -> RoomSelection:
    """Body `{"roomId": <positive int>}` or 400."""
    try:
        payload = await request.json()
        return RoomSelection.model_validate(payload)
    except ValidationError as e:
        # Raw inputs are left out: NaN is not serializable as JSON
        raise _bad_request([{"loc": err["loc"], "msg": err["msg"]} for err in e.errors()])
    except ValueError:
        # Empty or non-JSON body
        raise _bad_request("Request body must be a JSON object with roomId")


def parse_booking_id(bookingId: str) -> int:
    """Path segment `bookingId` as a positive int4 or 400."""
    try:
        return _row_id.validate_python(bookingId)
    except ValidationError:
        raise _bad_request("bookingId must be a positive 32-bit integer")
