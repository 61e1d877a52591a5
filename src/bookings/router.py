from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from src.database import get_db
from src.auth.dependencies import get_current_claims
from src.auth.schemas import TokenClaims
from src.bookings.schemas import TicketCreate, TicketCreated, Ticket, MessageResponse
from src.bookings.ticket_service import TicketService

router = APIRouter()

@router.post("", response_model=TicketCreated, status_code=status.HTTP_201_CREATED)
def book_ticket(
    request: TicketCreate,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """Book a ticket for the current user"""
    ticket = TicketService(db).create_ticket(claims, request)
    return TicketCreated(
        message="Ticket booked successfully",
        ticket_id=ticket.id,
        total_amount=ticket.total_amount
    )

@router.get("", response_model=List[Ticket])
def get_my_tickets(
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """Get the current user's tickets, newest first"""
    tickets = TicketService(db).get_user_tickets(claims.id)
    return [TicketService.to_schema(ticket) for ticket in tickets]

@router.get("/{ticket_id}", response_model=Ticket)
def get_ticket(
    ticket_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """Get ticket details by ID"""
    ticket = TicketService(db).get_ticket(claims, ticket_id)
    return TicketService.to_schema(ticket)

@router.put("/{ticket_id}/cancel", response_model=MessageResponse)
def cancel_ticket(
    ticket_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    db: Session = Depends(get_db)
):
    """Cancel one of the current user's tickets"""
    TicketService(db).cancel_ticket(claims, ticket_id)
    return MessageResponse(message="Ticket cancelled successfully")
