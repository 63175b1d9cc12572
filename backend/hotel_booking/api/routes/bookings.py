"""
Booking endpoints: read, create and move the caller's hotel booking.
"""

from fastapi import APIRouter, Depends

from hotel_booking.api.deps import get_booking_store, parse_booking_id, parse_room_selection
from hotel_booking.core.security import get_current_user_id
from hotel_booking.schemas.booking import BookingIdResponse, BookingResponse, RoomSelection
from hotel_booking.services.booking_service import create_booking, get_booking, move_booking
from hotel_booking.services.cache_service import (
    get_cached_booking,
    invalidate_booking_cache,
    set_cached_booking,
)
from hotel_booking.services.interfaces.booking_store import BookingStore

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=BookingResponse)
async def find_booking(
    user_id: int = Depends(get_current_user_id),
    store: BookingStore = Depends(get_booking_store),
):
    """
    Get the caller's booking with its room.
    Served from Redis when cached; 404 if the caller has no booking.
    """
    cached = await get_cached_booking(user_id)
    if cached:
        return BookingResponse.model_validate(cached)

    booking = await get_booking(store, user_id)
    response = BookingResponse.model_validate(booking)
    await set_cached_booking(user_id, response.model_dump(mode="json", by_alias=True))
    return response


@router.post("", response_model=BookingIdResponse)
async def post_booking(
    user_id: int = Depends(get_current_user_id),
    selection: RoomSelection = Depends(parse_room_selection),
    store: BookingStore = Depends(get_booking_store),
):
    """
    Book a place in a room.
    403 when the caller's enrollment/ticket does not allow hotel or the room
    is full, 404 when the room does not exist.
    """
    booking = await create_booking(store, user_id, selection.room_id)
    await store.commit()
    await invalidate_booking_cache(user_id)
    return BookingIdResponse(booking_id=booking.id)


@router.put("/{bookingId}", response_model=BookingIdResponse)
async def put_booking(
    user_id: int = Depends(get_current_user_id),
    selection: RoomSelection = Depends(parse_room_selection),
    booking_id: int = Depends(parse_booking_id),
    store: BookingStore = Depends(get_booking_store),
):
    """
    Move the caller's booking to another room. The booking id does not change.
    403 when the ticket does not allow hotel or the room is full, 404 when the
    booking or the room does not exist.
    """
    booking = await move_booking(store, user_id, selection.room_id, booking_id)
    await store.commit()
    await invalidate_booking_cache(user_id)
    return BookingIdResponse(booking_id=booking.id)
