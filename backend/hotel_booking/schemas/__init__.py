from hotel_booking.schemas.user import UserCreate, UserResponse, UserLogin, Token
from hotel_booking.schemas.booking import (
    RoomSelection, RoomResponse, BookingResponse, BookingIdResponse,
)

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "Token",
    "RoomSelection", "RoomResponse", "BookingResponse", "BookingIdResponse",
]
