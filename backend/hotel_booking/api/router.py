"""
Central API router that aggregates all route modules.

Mounted at the root: the booking contract is /booking, not /api/v1/booking.
"""

from fastapi import APIRouter
from hotel_booking.api.routes import auth, bookings

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(bookings.router)
