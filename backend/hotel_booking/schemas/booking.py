"""
Pydantic schemas for booking-related request/response validation.

The HTTP contract is camelCase (`roomId`, `bookingId`, `Room`), so fields
carry aliases; Python code keeps snake_case.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


# Ids are int4 columns in PostgreSQL
RowId = Annotated[int, Field(gt=0, le=2_147_483_647)]


class RoomSelection(BaseModel):
    """Body of POST /booking and PUT /booking/{bookingId}."""

    room_id: RowId = Field(alias="roomId")

    model_config = ConfigDict(populate_by_name=True)


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(alias="hotelId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BookingResponse(BaseModel):
    """Validates from a Booking row or from its own cached by-alias dump."""

    id: int
    room: RoomResponse = Field(alias="Room")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BookingIdResponse(BaseModel):
    booking_id: int = Field(alias="bookingId")

    model_config = ConfigDict(populate_by_name=True)
