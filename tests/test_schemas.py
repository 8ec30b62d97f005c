"""Tests for reservation, quote and room models."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from resort_calendar.schemas.booking_schema import (
    BookingResponse,
    Reservation,
    ReservationStatus,
    StayQuote,
)
from resort_calendar.schemas.room_schema import Room
from resort_calendar.utils import InvalidDateFormat


class TestReservationStatus:
    @pytest.mark.parametrize("raw,expected", [
        ("pending", ReservationStatus.PENDING),
        ("Confirmed", ReservationStatus.CONFIRMED),
        (" cancelled ", ReservationStatus.CANCELLED),
        ("checked_in", ReservationStatus.OTHER),
        (None, ReservationStatus.OTHER),
        (ReservationStatus.PENDING, ReservationStatus.PENDING),
    ])
    def test_coerce(self, raw, expected):
        assert ReservationStatus.coerce(raw) == expected


class TestReservation:
    def test_parses_iso_strings(self):
        r = Reservation(start_date="2024-06-10", end_date="2024-06-12", status="confirmed")
        assert r.start_date == date(2024, 6, 10)
        assert r.status == ReservationStatus.CONFIRMED
        assert r.is_active

    def test_datetime_collapses_to_day(self):
        r = Reservation(start_date=datetime(2024, 6, 10, 15), end_date=date(2024, 6, 12))
        assert r.start_date == date(2024, 6, 10)

    def test_cancelled_is_inactive(self):
        r = Reservation(start_date="2024-06-10", end_date="2024-06-12", status="cancelled")
        assert not r.is_active

    def test_unknown_status_is_other(self):
        r = Reservation(start_date="2024-06-10", end_date="2024-06-12", status="no_show")
        assert r.status == ReservationStatus.OTHER

    def test_malformed_date_is_validation_error(self):
        with pytest.raises(ValidationError):
            Reservation(start_date="10/06/2024", end_date="2024-06-12")

    def test_frozen(self):
        r = Reservation(start_date="2024-06-10", end_date="2024-06-12")
        with pytest.raises(ValidationError):
            r.status = ReservationStatus.CANCELLED  # type: ignore[misc]


class TestReservationFromRow:
    def test_maps_backend_columns(self):
        r = Reservation.from_row({
            "id": "bk-1",
            "room_id": "room-101",
            "check_in_date": "2024-06-10",
            "check_out_date": "2024-06-12",
            "status": "pending",
        })
        assert r.reservation_id == "bk-1"
        assert r.room_id == "room-101"
        assert r.end_date == date(2024, 6, 12)
        assert r.status == ReservationStatus.PENDING

    def test_null_status_is_other(self):
        r = Reservation.from_row({
            "check_in_date": "2024-06-10", "check_out_date": "2024-06-12", "status": None,
        })
        assert r.status == ReservationStatus.OTHER

    def test_malformed_day_propagates(self):
        with pytest.raises(InvalidDateFormat):
            Reservation.from_row({"check_in_date": "2024-02-30", "check_out_date": "2024-03-02"})


class TestStayQuote:
    def test_negative_nights_rejected(self):
        with pytest.raises(ValidationError):
            StayQuote(
                check_in=date(2024, 6, 10), check_out=date(2024, 6, 9),
                nights=-1, nightly_rate=100, total_price=0,
            )


class TestRoom:
    def test_defaults(self):
        room = Room(id="r", room_number="1", capacity=2, price_per_night=10)
        assert room.room_type == "Standard"
        assert room.is_available
        assert room.amenities == []

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Room(id="r", room_number="1", capacity=0, price_per_night=10)


class TestBookingResponse:
    def test_failure_defaults(self):
        response = BookingResponse(success=False, message="nope")
        assert response.reservation_id is None
        assert response.quote is None
