"""
Booking & Ticketing Module

This module provides ticket booking for the IndiaRail Booking API. It includes:

- Fare calculation from a train's base price, travel class and add-ons
- Seat map lookups and seat-selection checks
- Ticket booking with passengers, listing, detail and cancellation

Key Components:
- calculator.py: Class multipliers, seat maps and total price computation
- ticket_service.py: Ticket lifecycle against the database
- router.py: FastAPI endpoints for ticket management
- schemas.py: Pydantic models for booking and ticket data structures
"""

from .router import router
from .calculator import BookingCalculator, booking_calculator
from .ticket_service import TicketService
from .schemas import (
    TicketCreate, TicketCreated, Ticket, PassengerInfo, Passenger,
    SeatLayout, SeatMap, FareBreakdown
)

__all__ = [
    "router",
    "BookingCalculator",
    "booking_calculator",
    "TicketService",
    "TicketCreate",
    "TicketCreated",
    "Ticket",
    "PassengerInfo",
    "Passenger",
    "SeatLayout",
    "SeatMap",
    "FareBreakdown"
]
