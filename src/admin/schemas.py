from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime, date

from src.bookings.schemas import CamelModel, TicketStatus

class DashboardStats(CamelModel):
    """Headline counts shown on the admin dashboard"""
    user_count: int = Field(..., ge=0)
    train_count: int = Field(..., ge=0)
    ticket_count: int = Field(..., ge=0)
    cancelled_count: int = Field(..., ge=0)
    confirmed_revenue: float = Field(0, ge=0)

class RecentBooking(CamelModel):
    id: str
    booking_date: Optional[datetime] = None
    journey_date: date
    status: TicketStatus
    total_amount: float
    user_name: str
    train_name: str

class DashboardData(CamelModel):
    """Dashboard data response"""
    stats: DashboardStats
    recent_bookings: List[RecentBooking]
