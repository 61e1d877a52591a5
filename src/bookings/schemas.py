from pydantic import BaseModel, Field, validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Literal, FrozenSet
from datetime import datetime, date
from decimal import Decimal

from src.trains.schemas import TrainSummary

TicketStatus = Literal["confirmed", "waiting", "cancelled", "completed"]
Gender = Literal["male", "female", "other"]

class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the frontend"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True

# Seat map
class SeatLayout(BaseModel):
    rows: int
    seats_per_row: int
    booked_seats: FrozenSet[int] = frozenset()

    @property
    def total_seats(self) -> int:
        return self.rows * self.seats_per_row

class SeatMap(CamelModel):
    """Seat layout of one class with availability"""
    class_name: str
    rows: int
    seats_per_row: int
    total_seats: int
    booked_seats: List[int]
    available_seats: int

# Fare
class FareBreakdown(CamelModel):
    train_id: str
    class_name: str
    passenger_count: int
    base_price: float
    class_multiplier: float
    base_fare: float
    insurance: float
    special_meal: float
    service_fee: float
    total_amount: float

# Passenger Information
class PassengerInfo(CamelModel):
    """Individual passenger information"""
    name: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=0, le=125)
    gender: Gender

class Passenger(PassengerInfo):
    seat_number: Optional[int] = None

# Ticket Requests
class TicketCreate(CamelModel):
    """Request to book a ticket"""
    train_id: str
    journey_date: date
    class_name: str = Field(..., min_length=1, max_length=5)
    passengers: List[PassengerInfo]
    total_amount: Optional[Decimal] = Field(None, ge=0)
    seats: Optional[List[int]] = None
    insurance: bool = False
    special_meal: bool = False

    @validator("train_id", pre=True)
    def coerce_train_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

# Ticket Responses
class TicketCreated(CamelModel):
    message: str
    ticket_id: str
    total_amount: float

class Ticket(CamelModel):
    id: str
    train: TrainSummary
    journey_date: date
    booking_date: Optional[datetime] = None
    class_name: str = Field(..., alias="class")
    status: TicketStatus
    total_amount: float
    passengers: List[Passenger] = []

class MessageResponse(BaseModel):
    message: str
