"""
Admin System Module

Administrative views for the IndiaRail Booking API. Every endpoint requires a
bearer token whose role claim is ``admin``.

- admin_service.py: dashboard counts and the latest bookings
- router.py: FastAPI endpoints
- schemas.py: Pydantic response models
"""

from . import router, schemas, admin_service

__all__ = [
    "router",
    "schemas",
    "admin_service"
]
