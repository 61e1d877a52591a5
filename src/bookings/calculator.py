"""
Fare and seat-map rules for ticket booking.

All amounts are computed with ``Decimal`` and rounded to paise (two decimal
places). The seat maps are fixed layouts; their booked seats are not derived
from tickets stored in the database.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Union

from src.bookings.schemas import SeatLayout, SeatMap, FareBreakdown
from src.exceptions import InvalidClass, InvalidPassengerCount, SeatSelectionError, ValidationError

Number = Union[int, float, Decimal, str]

CLASS_PRICE_MULTIPLIERS: Dict[str, Decimal] = {
    "SL": Decimal("1"),
    "3A": Decimal("1.5"),
    "2A": Decimal("2.2"),
    "1A": Decimal("3"),
    "CC": Decimal("1.2"),
    "EC": Decimal("1.8"),
}

SEAT_MAP: Dict[str, SeatLayout] = {
    "SL": SeatLayout(rows=8, seats_per_row=8, booked_seats=frozenset({3, 12, 18, 24, 36, 45, 52})),
    "3A": SeatLayout(rows=7, seats_per_row=6, booked_seats=frozenset({5, 10, 19, 28, 32})),
    "2A": SeatLayout(rows=5, seats_per_row=4, booked_seats=frozenset({2, 8, 14})),
    "1A": SeatLayout(rows=3, seats_per_row=2, booked_seats=frozenset({3})),
    "CC": SeatLayout(rows=9, seats_per_row=5, booked_seats=frozenset({7, 15, 22, 31, 38})),
    "EC": SeatLayout(rows=6, seats_per_row=4, booked_seats=frozenset({4, 13, 20})),
}

INSURANCE_PER_PASSENGER = Decimal("49")
SPECIAL_MEAL_PER_PASSENGER = Decimal("150")
SERVICE_FEE_PER_PASSENGER = Decimal("25")
MAX_PASSENGERS_PER_BOOKING = 6

_PAISE = Decimal("0.01")


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float literals such as 1450.5 exact
    return Decimal(str(value))


class BookingCalculator:
    """Deterministic price and seat-map lookups for a booking"""

    def __init__(
        self,
        multipliers: Optional[Dict[str, Decimal]] = None,
        seat_map: Optional[Dict[str, SeatLayout]] = None,
    ):
        self.multipliers = multipliers if multipliers is not None else CLASS_PRICE_MULTIPLIERS
        self.seat_map = seat_map if seat_map is not None else SEAT_MAP

    # Lookups
    def class_multiplier(self, class_code: str) -> Decimal:
        """Multiplier applied to a train's base price; unknown classes use 1"""
        return self.multipliers.get(class_code, Decimal("1"))

    def total_seats(self, class_code: str) -> int:
        layout = self.seat_map.get(class_code)
        return layout.total_seats if layout else 0

    def is_booked(self, class_code: str, seat_number: int) -> bool:
        layout = self.seat_map.get(class_code)
        return bool(layout) and seat_number in layout.booked_seats

    def get_seat_map(self, class_code: str) -> SeatMap:
        layout = self.seat_map.get(class_code)
        if not layout:
            raise InvalidClass(f"No seat map for class {class_code}")

        booked = sorted(layout.booked_seats)
        return SeatMap(
            class_name=class_code,
            rows=layout.rows,
            seats_per_row=layout.seats_per_row,
            total_seats=layout.total_seats,
            booked_seats=booked,
            available_seats=layout.total_seats - len(booked),
        )

    # Pricing
    def compute_total(
        self,
        base_price: Number,
        class_code: str,
        passenger_count: int,
        insurance: bool = False,
        special_meal: bool = False,
    ) -> Decimal:
        """Total fare: class-adjusted base fare plus per-passenger add-ons and service fee"""
        return self.fare_breakdown(base_price, class_code, passenger_count, insurance, special_meal)["total_amount"]

    def fare_breakdown(
        self,
        base_price: Number,
        class_code: str,
        passenger_count: int,
        insurance: bool = False,
        special_meal: bool = False,
    ) -> Dict[str, Decimal]:
        if passenger_count is None or passenger_count < 1:
            raise InvalidPassengerCount()

        base = _to_decimal(base_price)
        if base < 0:
            raise ValidationError("Base price cannot be negative")

        count = Decimal(passenger_count)
        multiplier = self.class_multiplier(class_code)

        base_fare = base * multiplier * count
        insurance_cost = INSURANCE_PER_PASSENGER * count if insurance else Decimal("0")
        meal_cost = SPECIAL_MEAL_PER_PASSENGER * count if special_meal else Decimal("0")
        service_fee = SERVICE_FEE_PER_PASSENGER * count
        total = base_fare + insurance_cost + meal_cost + service_fee

        return {
            "base_price": base,
            "class_multiplier": multiplier,
            "base_fare": base_fare.quantize(_PAISE, rounding=ROUND_HALF_UP),
            "insurance": insurance_cost.quantize(_PAISE),
            "special_meal": meal_cost.quantize(_PAISE),
            "service_fee": service_fee.quantize(_PAISE),
            "total_amount": total.quantize(_PAISE, rounding=ROUND_HALF_UP),
        }

    def quote(
        self,
        train,
        class_code: str,
        passenger_count: int,
        insurance: bool = False,
        special_meal: bool = False,
    ) -> FareBreakdown:
        """Fare breakdown for a stored train, checking the class is offered on it"""
        self.validate_class(train, class_code)
        breakdown = self.fare_breakdown(train.price, class_code, passenger_count, insurance, special_meal)
        return FareBreakdown(
            train_id=str(train.id),
            class_name=class_code,
            passenger_count=passenger_count,
            **breakdown,
        )

    # Validation
    @staticmethod
    def train_classes(train) -> List[str]:
        return [c.class_code for c in train.classes]

    def validate_class(self, train, class_code: str) -> None:
        if class_code not in self.train_classes(train):
            raise InvalidClass(f"Class {class_code} is not available on train {train.number}")

    @staticmethod
    def validate_passenger_count(passenger_count: int) -> None:
        if passenger_count < 1:
            raise InvalidPassengerCount()
        if passenger_count > MAX_PASSENGERS_PER_BOOKING:
            raise InvalidPassengerCount(
                f"You can book for a maximum of {MAX_PASSENGERS_PER_BOOKING} passengers at a time"
            )

    def validate_seat_selection(self, class_code: str, seats: Iterable[int], passenger_count: int) -> List[int]:
        """Exactly one distinct, existing, unbooked seat per passenger"""
        seats = list(seats)
        if len(seats) != passenger_count:
            raise SeatSelectionError(f"Please select {passenger_count} seats for all passengers")

        if len(set(seats)) != len(seats):
            raise SeatSelectionError("Each passenger needs a different seat")

        total = self.total_seats(class_code)
        for seat in seats:
            if seat < 1 or seat > total:
                raise SeatSelectionError(f"Seat {seat} does not exist in class {class_code}")
            if self.is_booked(class_code, seat):
                raise SeatSelectionError(f"Seat {seat} is already booked")

        return seats


booking_calculator = BookingCalculator()
