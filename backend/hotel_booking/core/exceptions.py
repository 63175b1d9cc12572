"""
Booking engine errors.

The engine raises exactly one exception type, `BookingError`, tagged with a
member of the closed `BookingErrorKind` enum. The HTTP boundary maps kinds
to status codes in `hotel_booking.api.errors`.
"""

import enum
from typing import Optional


class BookingErrorKind(str, enum.Enum):
    NOT_FOUND = "NotFound"
    CANNOT_LIST_HOTELS = "CannotListHotels"
    FORBIDDEN = "Forbidden"
    FULL_ROOM = "FullRoom"


DEFAULT_MESSAGES = {
    BookingErrorKind.NOT_FOUND: "No result for this search",
    BookingErrorKind.CANNOT_LIST_HOTELS: "Cannot list hotels",
    BookingErrorKind.FORBIDDEN: "Ticket does not allow changing hotel bookings",
    BookingErrorKind.FULL_ROOM: "Room at full capacity",
}


class BookingError(Exception):
    """A booking rule was violated. `kind` says which one."""

    def __init__(self, kind: BookingErrorKind, message: Optional[str] = None) -> None:
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"BookingError(kind={self.kind.value!r}, message={self.message!r})"
