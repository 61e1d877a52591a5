"""Booking calculator tests."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.bookings.calculator import (
    BookingCalculator,
    CLASS_PRICE_MULTIPLIERS,
    MAX_PASSENGERS_PER_BOOKING,
    booking_calculator,
)
from src.exceptions import InvalidClass, InvalidPassengerCount, SeatSelectionError, ValidationError


def make_train(classes, price=1450, number='12301', train_id=1):
    return SimpleNamespace(
        id=train_id,
        number=number,
        price=Decimal(str(price)),
        classes=[SimpleNamespace(class_code=code) for code in classes],
    )


class TestClassMultiplier:
    @pytest.mark.parametrize(
        'class_code,expected',
        [('SL', 1), ('3A', Decimal('1.5')), ('2A', Decimal('2.2')), ('1A', 3), ('CC', Decimal('1.2')), ('EC', Decimal('1.8'))],
    )
    def test_fixed_table(self, class_code, expected):
        assert booking_calculator.class_multiplier(class_code) == expected

    def test_unknown_class_defaults_to_one(self):
        assert booking_calculator.class_multiplier('XX') == 1


class TestSeatMap:
    def test_total_seats_is_rows_times_seats_per_row(self):
        assert booking_calculator.total_seats('SL') == 64
        assert booking_calculator.total_seats('3A') == 42
        assert booking_calculator.total_seats('1A') == 6

    def test_unknown_class_has_no_seats(self):
        assert booking_calculator.total_seats('XX') == 0

    def test_is_booked(self):
        assert booking_calculator.is_booked('SL', 3)
        assert not booking_calculator.is_booked('SL', 4)
        assert not booking_calculator.is_booked('XX', 3)

    def test_get_seat_map_reports_availability(self):
        seat_map = booking_calculator.get_seat_map('2A')

        assert seat_map.total_seats == 20
        assert seat_map.booked_seats == [2, 8, 14]
        assert seat_map.available_seats == 17

    def test_get_seat_map_unknown_class(self):
        with pytest.raises(InvalidClass):
            booking_calculator.get_seat_map('XX')


class TestComputeTotal:
    def test_sleeper_without_add_ons(self):
        for n in range(1, 7):
            assert booking_calculator.compute_total(1450, 'SL', n) == 1450 * n + 25 * n

    def test_three_tier_two_passengers(self):
        assert booking_calculator.compute_total(1450, '3A', 2) == Decimal('4400')

    def test_add_ons_are_charged_per_passenger(self):
        total = booking_calculator.compute_total(850, 'CC', 3, insurance=True, special_meal=True)

        assert total == Decimal('850') * Decimal('1.2') * 3 + 49 * 3 + 150 * 3 + 25 * 3

    def test_rounds_to_two_decimal_places(self):
        assert booking_calculator.compute_total('999.99', '2A', 1) == Decimal('2224.98')

    @pytest.mark.parametrize('class_code', list(CLASS_PRICE_MULTIPLIERS) + ['XX'])
    def test_monotonic_in_passenger_count(self, class_code):
        totals = [booking_calculator.compute_total(1250, class_code, n) for n in range(1, 11)]
        assert totals == sorted(totals)

    @pytest.mark.parametrize('class_code', list(CLASS_PRICE_MULTIPLIERS))
    def test_monotonic_in_add_ons(self, class_code):
        plain = booking_calculator.compute_total(1200, class_code, 2)
        insured = booking_calculator.compute_total(1200, class_code, 2, insurance=True)
        meal = booking_calculator.compute_total(1200, class_code, 2, special_meal=True)
        both = booking_calculator.compute_total(1200, class_code, 2, insurance=True, special_meal=True)

        assert plain <= insured <= both
        assert plain <= meal <= both

    def test_zero_passengers_is_rejected(self):
        with pytest.raises(InvalidPassengerCount):
            booking_calculator.compute_total(1450, 'SL', 0)

    def test_negative_base_price_is_rejected(self):
        with pytest.raises(ValidationError):
            booking_calculator.compute_total(-1, 'SL', 1)

    def test_custom_tables(self):
        calculator = BookingCalculator(multipliers={'VIP': Decimal('10')}, seat_map={})

        assert calculator.compute_total(100, 'VIP', 1) == Decimal('1025')
        assert calculator.total_seats('SL') == 0


class TestQuote:
    def test_breakdown_sums_to_total(self):
        quote = booking_calculator.quote(make_train(['SL', '3A']), '3A', 2, insurance=True)

        assert quote.train_id == '1'
        assert quote.base_fare == 4350
        assert quote.insurance == 98
        assert quote.special_meal == 0
        assert quote.service_fee == 50
        assert quote.total_amount == 4498

    def test_class_not_offered_on_train(self):
        with pytest.raises(InvalidClass):
            booking_calculator.quote(make_train(['CC', 'EC']), 'SL', 1)


class TestValidation:
    def test_passenger_count_bounds(self):
        booking_calculator.validate_passenger_count(1)
        booking_calculator.validate_passenger_count(MAX_PASSENGERS_PER_BOOKING)

        with pytest.raises(InvalidPassengerCount):
            booking_calculator.validate_passenger_count(0)
        with pytest.raises(InvalidPassengerCount):
            booking_calculator.validate_passenger_count(MAX_PASSENGERS_PER_BOOKING + 1)

    def test_valid_seat_selection(self):
        assert booking_calculator.validate_seat_selection('3A', [1, 2], 2) == [1, 2]

    @pytest.mark.parametrize(
        'seats,message',
        [
            ([1], 'Please select 2 seats'),
            ([1, 1], 'different seat'),
            ([1, 43], 'does not exist'),
            ([0, 1], 'does not exist'),
            ([1, 5], 'already booked'),
        ],
    )
    def test_invalid_seat_selection(self, seats, message):
        with pytest.raises(SeatSelectionError) as exc_info:
            booking_calculator.validate_seat_selection('3A', seats, 2)

        assert message in exc_info.value.message
