"""
Conference Hotel Booking API - Main Application Entry Point

Lets an authenticated attendee view, create and move their hotel-room
booking:
- Eligibility rules tied to enrollment and ticket (paid, in-person, hotel)
- Capacity check under a room row lock to prevent overbooking
- Structured logging with request correlation
- Optional Redis cache for the booking read
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_booking.core.config import get_settings
from hotel_booking.core.exceptions import BookingError
from hotel_booking.core.logging import setup_logging, get_logger
from hotel_booking.core.metrics import metrics_endpoint
from hotel_booking.api.errors import booking_error_handler
from hotel_booking.api.router import api_router
from hotel_booking.api.middleware import RequestLoggingMiddleware
from hotel_booking.services.cache_service import get_redis, close_redis, get_cache_stats

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    redis_client = await get_redis()
    if redis_client:
        logger.info("redis_ready")
    else:
        logger.warning("redis_unavailable", message="Serving bookings without cache")

    yield

    await close_redis()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Hotel-room booking for conference attendees",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_exception_handler(BookingError, booking_error_handler)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    cache_stats = await get_cache_stats()
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "cache": cache_stats,
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()
