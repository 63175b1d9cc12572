"""
Persistence interface for the booking engine.
Allows swapping the SQL store for an in-memory one without touching the rules.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_booking.models.booking import Booking
from hotel_booking.models.enrollment import Enrollment
from hotel_booking.models.hotel import Room
from hotel_booking.models.ticket import Ticket


class BookingStore(ABC):
    """
    Lookups and writes the booking service needs.

    Implementations:
    - SqlBookingStore: SQLAlchemy AsyncSession, row-locks rooms
    - tests use an in-memory store
    """

    @abstractmethod
    async def find_booking_by_user(self, user_id: int) -> Optional[Booking]:
        """The user's first booking (lowest id) with its room loaded, or None."""

    @abstractmethod
    async def find_user_booking(self, user_id: int, booking_id: int) -> Optional[Booking]:
        """Booking `booking_id` if it belongs to `user_id`, else None."""

    @abstractmethod
    async def find_enrollment_with_address(self, user_id: int) -> Optional[Enrollment]:
        pass

    @abstractmethod
    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        """Ticket with its type loaded."""

    @abstractmethod
    async def lock_room(self, room_id: int) -> Optional[Room]:
        """
        Fetch a room and hold it against concurrent capacity checks until
        the current unit of work ends.
        """

    @abstractmethod
    async def count_room_occupants(self, room_id: int) -> int:
        pass

    @abstractmethod
    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        pass

    @abstractmethod
    async def move_booking(self, booking: Booking, room_id: int) -> Booking:
        """Point an existing booking at another room, keeping its id."""

    @abstractmethod
    async def commit(self) -> None:
        """End the unit of work, releasing room locks. Raises if the write did not persist."""
