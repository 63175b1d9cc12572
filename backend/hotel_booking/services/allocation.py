"""
Pure booking rules.

Each function inspects already-loaded records and either returns or raises
`BookingError`. None of them touch the database, so the service decides the
order of lookups and the first failing rule stops the operation.
"""

from typing import Optional

from hotel_booking.core.exceptions import BookingError, BookingErrorKind
from hotel_booking.models.enrollment import Enrollment
from hotel_booking.models.hotel import Room
from hotel_booking.models.ticket import Ticket, TicketStatus


def ensure_enrolled(enrollment: Optional[Enrollment]) -> Enrollment:
    if enrollment is None:
        raise BookingError(BookingErrorKind.CANNOT_LIST_HOTELS, "User has no enrollment")
    return enrollment


def ensure_ticket_allows_booking(ticket: Optional[Ticket]) -> Ticket:
    """A new booking needs a paid, in-person ticket whose type includes hotel."""
    if ticket is None:
        raise BookingError(BookingErrorKind.CANNOT_LIST_HOTELS, "User has no ticket")
    if ticket.status == TicketStatus.RESERVED:
        raise BookingError(BookingErrorKind.CANNOT_LIST_HOTELS, "Ticket is not paid")
    if ticket.ticket_type.is_remote:
        raise BookingError(BookingErrorKind.CANNOT_LIST_HOTELS, "Remote tickets do not include hotel")
    if not ticket.ticket_type.includes_hotel:
        raise BookingError(BookingErrorKind.CANNOT_LIST_HOTELS, "Ticket type does not include hotel")
    return ticket


def ensure_ticket_allows_move(ticket: Optional[Ticket]) -> Ticket:
    """
    Moving only requires a paid ticket whose type includes hotel.
    Remote-ness is not re-checked here.
    """
    if ticket is None:
        raise BookingError(BookingErrorKind.FORBIDDEN, "User has no ticket")
    if ticket.status == TicketStatus.RESERVED:
        raise BookingError(BookingErrorKind.FORBIDDEN, "Ticket is not paid")
    if not ticket.ticket_type.includes_hotel:
        raise BookingError(BookingErrorKind.FORBIDDEN, "Ticket type does not include hotel")
    return ticket


def ensure_room_exists(room: Optional[Room], room_id: int) -> Room:
    if room is None:
        raise BookingError(BookingErrorKind.NOT_FOUND, f"Room {room_id} not found")
    return room


def ensure_vacancy(room: Room, occupants: int) -> None:
    # Occupants include the caller's own booking when moving within a room
    if occupants >= room.capacity:
        raise BookingError(BookingErrorKind.FULL_ROOM)
