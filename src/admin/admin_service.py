from typing import List
from sqlalchemy import func, desc
from sqlalchemy.orm import Session

from src.models import User, Train, Ticket
from src.admin.schemas import DashboardStats, RecentBooking, DashboardData

RECENT_BOOKINGS_LIMIT = 10

class DashboardService:
    """Aggregate queries behind the admin dashboard"""

    def __init__(self, db: Session):
        self.db = db

    def get_stats(self) -> DashboardStats:
        user_count = self.db.query(User).filter(User.role == "user").count()
        train_count = self.db.query(Train).count()
        ticket_count = self.db.query(Ticket).count()
        cancelled_count = self.db.query(Ticket).filter(Ticket.status == "cancelled").count()
        confirmed_revenue = self.db.query(func.sum(Ticket.total_amount)).filter(
            Ticket.status == "confirmed"
        ).scalar() or 0

        return DashboardStats(
            user_count=user_count,
            train_count=train_count,
            ticket_count=ticket_count,
            cancelled_count=cancelled_count,
            confirmed_revenue=confirmed_revenue
        )

    def get_recent_bookings(self, limit: int = RECENT_BOOKINGS_LIMIT) -> List[RecentBooking]:
        """Latest bookings across all users"""
        rows = self.db.query(
            Ticket.id,
            Ticket.booking_date,
            Ticket.journey_date,
            Ticket.status,
            Ticket.total_amount,
            User.name.label("user_name"),
            Train.name.label("train_name")
        ).join(
            User, Ticket.user_id == User.id
        ).join(
            Train, Ticket.train_id == Train.id
        ).order_by(desc(Ticket.booking_date)).limit(limit).all()

        return [
            RecentBooking(
                id=row.id,
                booking_date=row.booking_date,
                journey_date=row.journey_date,
                status=row.status,
                total_amount=row.total_amount,
                user_name=row.user_name,
                train_name=row.train_name
            )
            for row in rows
        ]

    def get_dashboard(self) -> DashboardData:
        return DashboardData(
            stats=self.get_stats(),
            recent_bookings=self.get_recent_bookings()
        )
