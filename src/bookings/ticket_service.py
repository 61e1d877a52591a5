from typing import List, Optional
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from src.models import Ticket, Passenger
from src.auth.schemas import TokenClaims
from src.auth.utils import is_admin
from src.bookings.calculator import BookingCalculator, booking_calculator
from src.bookings.schemas import TicketCreate, Ticket as TicketSchema, Passenger as PassengerSchema
from src.trains.service import TrainService
from src.exceptions import TicketNotFound, ValidationError
from src.logger import logger

CANCELLABLE_STATUSES = ("confirmed",)
TICKET_ID_ATTEMPTS = 5

class TicketService:
    """Service for booking, listing and cancelling tickets"""

    def __init__(self, db: Session, calculator: Optional[BookingCalculator] = None):
        self.db = db
        self.calculator = calculator or booking_calculator

    @staticmethod
    def _to_paise(amount) -> Decimal:
        return Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    def generate_ticket_id(self) -> str:
        """Short ticket code, re-drawn until it is not already taken"""
        while True:
            ticket_id = f"T{uuid.uuid4().hex[:8].upper()}"
            if not self.db.query(Ticket.id).filter(Ticket.id == ticket_id).first():
                return ticket_id

    def create_ticket(self, claims: TokenClaims, request: TicketCreate) -> Ticket:
        """Book a ticket for the authenticated user"""

        if request.journey_date < date.today():
            raise ValidationError("Journey date cannot be in the past")

        train = TrainService.get_train_or_404(self.db, request.train_id)
        passenger_count = len(request.passengers)

        self.calculator.validate_passenger_count(passenger_count)
        self.calculator.validate_class(train, request.class_name)

        seats: List[Optional[int]] = [None] * passenger_count
        if request.seats is not None:
            seats = self.calculator.validate_seat_selection(request.class_name, request.seats, passenger_count)

        total_amount = self.calculator.compute_total(
            train.price,
            request.class_name,
            passenger_count,
            insurance=request.insurance,
            special_meal=request.special_meal
        )

        if request.total_amount is not None and self._to_paise(request.total_amount) != total_amount:
            raise ValidationError(
                f"Total amount {request.total_amount} does not match fare {total_amount}"
            )

        for attempt in range(1, TICKET_ID_ATTEMPTS + 1):
            ticket = self._build_ticket(self.generate_ticket_id(), claims, request, train, total_amount, seats)
            self.db.add(ticket)
            try:
                self.db.commit()
                break
            except IntegrityError:
                # Another booking took the same id between the check and the insert
                self.db.rollback()
                if attempt == TICKET_ID_ATTEMPTS:
                    raise
                logger.warning(f"Ticket id {ticket.id} already taken, drawing a new one")
        self.db.refresh(ticket)

        logger.info(
            f"User {claims.id} booked ticket {ticket.id} on train {train.number} "
            f"class {ticket.class_code} for {passenger_count} passenger(s), total {total_amount}"
        )
        return ticket

    @staticmethod
    def _build_ticket(ticket_id, claims, request, train, total_amount, seats) -> Ticket:
        ticket = Ticket(
            id=ticket_id,
            user_id=claims.id,
            train_id=train.id,
            journey_date=request.journey_date,
            booking_date=datetime.now(timezone.utc),
            class_code=request.class_name,
            status="confirmed",
            total_amount=total_amount
        )
        ticket.passengers = [
            Passenger(
                name=passenger.name,
                age=passenger.age,
                gender=passenger.gender,
                seat_number=seat
            )
            for passenger, seat in zip(request.passengers, seats)
        ]
        return ticket

    def _ticket_query(self):
        return self.db.query(Ticket).options(
            selectinload(Ticket.train),
            selectinload(Ticket.passengers)
        )

    def get_user_tickets(self, user_id: int) -> List[Ticket]:
        """All tickets of a user, newest booking first"""
        return self._ticket_query().filter(
            Ticket.user_id == user_id
        ).order_by(Ticket.booking_date.desc()).all()

    def get_ticket(self, claims: TokenClaims, ticket_id: str) -> Ticket:
        """A ticket owned by the caller; admins may read any ticket"""
        query = self._ticket_query().filter(Ticket.id == ticket_id)
        if not is_admin(claims):
            query = query.filter(Ticket.user_id == claims.id)

        ticket = query.first()
        if not ticket:
            raise TicketNotFound()
        return ticket

    def cancel_ticket(self, claims: TokenClaims, ticket_id: str) -> Ticket:
        """Cancel one of the caller's own tickets"""
        ticket = self.db.query(Ticket).filter(
            Ticket.id == ticket_id,
            Ticket.user_id == claims.id
        ).first()
        if not ticket:
            raise TicketNotFound()

        if ticket.status == "cancelled":
            return ticket

        if ticket.status not in CANCELLABLE_STATUSES:
            raise ValidationError(f"Ticket cannot be cancelled. Status: {ticket.status}")

        ticket.status = "cancelled"
        self.db.commit()
        self.db.refresh(ticket)

        logger.info(f"User {claims.id} cancelled ticket {ticket.id}")
        return ticket

    @staticmethod
    def to_schema(ticket: Ticket) -> TicketSchema:
        return TicketSchema(
            id=ticket.id,
            train=TrainService.to_summary(ticket.train),
            journey_date=ticket.journey_date,
            booking_date=ticket.booking_date,
            class_name=ticket.class_code,
            status=ticket.status,
            total_amount=ticket.total_amount,
            passengers=[
                PassengerSchema(name=p.name, age=p.age, gender=p.gender, seat_number=p.seat_number)
                for p in ticket.passengers
            ]
        )
