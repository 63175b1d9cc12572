"""
SQLAlchemy implementation of BookingStore.

CONCURRENCY: Pessimistic lock on the target room
================================================

Problem:
  Two attendees ask for the last bed in a room at the same time.
  Both count occupants=capacity-1, both insert. Result: overbooking.

Solution:
  lock_room() issues SELECT ... FOR UPDATE on the room row. The second
  request blocks on that row until the first transaction commits, and then
  counts occupants including the booking just written. The lock is held
  until the write routes call commit(), before the response is built.

  Contention is per room and rooms hold a handful of people, so serializing
  writers is cheap here; there is nothing to retry.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hotel_booking.models.booking import Booking
from hotel_booking.models.enrollment import Enrollment
from hotel_booking.models.hotel import Room
from hotel_booking.models.ticket import Ticket
from hotel_booking.services.interfaces.booking_store import BookingStore


class SqlBookingStore(BookingStore):

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_booking_by_user(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .order_by(Booking.id.asc())
            .limit(1)
        )
        return result.scalars().first()

    async def find_user_booking(self, user_id: int, booking_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking).where(
                Booking.id == booking_id,
                Booking.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def find_enrollment_with_address(self, user_id: int) -> Optional[Enrollment]:
        result = await self.db.execute(
            select(Enrollment)
            .options(selectinload(Enrollment.address))
            .where(Enrollment.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        result = await self.db.execute(
            select(Ticket).where(Ticket.enrollment_id == enrollment_id)
        )
        return result.scalar_one_or_none()

    async def lock_room(self, room_id: int) -> Optional[Room]:
        result = await self.db.execute(
            select(Room).where(Room.id == room_id).with_for_update()
        )
        return result.scalar_one_or_none()

    async def count_room_occupants(self, room_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Booking.id)).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        await self.db.flush()
        await self.db.refresh(booking, attribute_names=["room"])
        return booking

    async def move_booking(self, booking: Booking, room_id: int) -> Booking:
        booking.room_id = room_id
        await self.db.flush()
        # Reload the relationship so the returned booking reflects the new room
        await self.db.refresh(booking, attribute_names=["room"])
        return booking

    async def commit(self) -> None:
        await self.db.commit()
