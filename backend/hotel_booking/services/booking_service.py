"""
Booking service: reading, creating and moving a user's hotel booking.

Every operation is a fixed sequence of lookups, each followed by the rule
that depends on it. The first failing rule raises BookingError and nothing
after it runs, so e.g. capacity is never counted for a room that does not
exist.

create_booking                      move_booking
  1. enrollment      CannotListHotels   1. ticket        Forbidden
  2. ticket          CannotListHotels   2. own booking   NotFound
  3. room (locked)   NotFound           3. room (locked) NotFound
  4. occupants       FullRoom           4. occupants     FullRoom

KNOWN QUIRK: move_booking counts occupants of the target room without
excluding the caller's own booking, so "moving" into the room you already
occupy fails with FullRoom when that room is full. Kept as-is until the
behaviour change is agreed on.
"""

import time
from functools import wraps

from hotel_booking.core.exceptions import BookingError, BookingErrorKind
from hotel_booking.core.logging import get_logger
from hotel_booking.core.metrics import booking_latency, record_booking_operation
from hotel_booking.models.booking import Booking
from hotel_booking.services.allocation import (
    ensure_enrolled,
    ensure_room_exists,
    ensure_ticket_allows_booking,
    ensure_ticket_allows_move,
    ensure_vacancy,
)
from hotel_booking.services.interfaces.booking_store import BookingStore

logger = get_logger(__name__)


def _instrumented(operation: str):
    """Record outcome and latency of an engine operation."""

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except BookingError as e:
                record_booking_operation(operation, e.kind.value)
                raise
            except Exception:
                record_booking_operation(operation, "error")
                raise
            else:
                record_booking_operation(operation, "success")
                return result
            finally:
                booking_latency.labels(operation=operation).observe(time.perf_counter() - start)

        return wrapper

    return decorator


def _reject(error: BookingError, **context) -> BookingError:
    logger.info("booking_rejected", reason=error.kind.value, detail=error.message, **context)
    return error


@_instrumented("get")
async def get_booking(store: BookingStore, user_id: int) -> Booking:
    """Return the user's booking with its room."""
    booking = await store.find_booking_by_user(user_id)
    if booking is None:
        raise BookingError(BookingErrorKind.NOT_FOUND, "User has no booking")
    return booking


@_instrumented("create")
async def create_booking(store: BookingStore, user_id: int, room_id: int) -> Booking:
    """Reserve a place in `room_id` for the user."""
    try:
        enrollment = ensure_enrolled(await store.find_enrollment_with_address(user_id))
        ensure_ticket_allows_booking(await store.find_ticket_by_enrollment(enrollment.id))
        room = ensure_room_exists(await store.lock_room(room_id), room_id)
        ensure_vacancy(room, await store.count_room_occupants(room_id))
    except BookingError as e:
        raise _reject(e, operation="create", user_id=user_id, room_id=room_id)

    booking = await store.create_booking(user_id, room_id)
    logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
    return booking


@_instrumented("move")
async def move_booking(store: BookingStore, user_id: int, room_id: int, booking_id: int) -> Booking:
    """Move the user's booking `booking_id` to `room_id`. The booking id is preserved."""
    try:
        enrollment = await store.find_enrollment_with_address(user_id)
        ticket = await store.find_ticket_by_enrollment(enrollment.id) if enrollment else None
        ensure_ticket_allows_move(ticket)

        booking = await store.find_user_booking(user_id, booking_id)
        if booking is None:
            raise BookingError(BookingErrorKind.NOT_FOUND, f"Booking {booking_id} not found")

        room = ensure_room_exists(await store.lock_room(room_id), room_id)
        ensure_vacancy(room, await store.count_room_occupants(room_id))
    except BookingError as e:
        raise _reject(
            e, operation="move", user_id=user_id, room_id=room_id, booking_id=booking_id
        )

    previous_room_id = booking.room_id
    booking = await store.move_booking(booking, room_id)
    logger.info(
        "booking_moved",
        booking_id=booking.id,
        user_id=user_id,
        from_room_id=previous_room_id,
        to_room_id=room_id,
    )
    return booking
