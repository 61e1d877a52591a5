from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from src.database import get_db
from src.trains.schemas import Train
from src.trains.service import TrainService
from src.bookings.calculator import booking_calculator, MAX_PASSENGERS_PER_BOOKING
from src.bookings.schemas import FareBreakdown, SeatMap

router = APIRouter()

@router.get("", response_model=List[Train])
def get_trains(db: Session = Depends(get_db)):
    """Get all trains with classes and amenities"""
    trains = TrainService.get_trains(db)
    return [TrainService.to_schema(train) for train in trains]

@router.get("/{train_id}", response_model=Train)
def get_train(train_id: str, db: Session = Depends(get_db)):
    """Get train details by ID"""
    train = TrainService.get_train_or_404(db, train_id)
    return TrainService.to_schema(train)

@router.get("/{train_id}/fare", response_model=FareBreakdown)
def get_fare_quote(
    train_id: str,
    class_name: str = Query(..., alias="className", description="Travel class code"),
    passengers: int = Query(1, ge=1, le=MAX_PASSENGERS_PER_BOOKING, description="Number of passengers"),
    insurance: bool = Query(False, description="Add travel insurance"),
    special_meal: bool = Query(False, alias="specialMeal", description="Add special meal"),
    db: Session = Depends(get_db)
):
    """Price a booking before it is made"""
    train = TrainService.get_train_or_404(db, train_id)
    return booking_calculator.quote(
        train,
        class_name,
        passengers,
        insurance=insurance,
        special_meal=special_meal
    )

@router.get("/{train_id}/seats/{class_name}", response_model=SeatMap)
def get_seat_map(train_id: str, class_name: str, db: Session = Depends(get_db)):
    """Seat layout and booked seats for one class of a train"""
    train = TrainService.get_train_or_404(db, train_id)
    booking_calculator.validate_class(train, class_name)
    return booking_calculator.get_seat_map(class_name)
