"""
Mock room reservation store.

In production, this would query and insert into the ``room_bookings``
table of the hosted database. The calendar only ever reads a snapshot
of one room's reservations for a bounded future window.
"""

import uuid
from datetime import date, datetime, timezone
from typing import Optional, TypedDict

from resort_calendar.calendar.pricing import InvalidRangeError, quote
from resort_calendar.config import settings
from resort_calendar.logging_context import get_session_logger
from resort_calendar.schemas.booking_schema import (
    BookingRequest,
    BookingResponse,
    Reservation,
    ReservationStatus,
)
from resort_calendar.tools.rooms import get_room
from resort_calendar.utils import add_days, format_date

logger = get_session_logger(__name__)


class ReservationRecord(TypedDict):
    """Full reservation row stored in the system."""

    id: str
    room_id: str
    user_id: Optional[str]
    guest_name: str
    phone_number: str
    check_in_date: str
    check_out_date: str
    guest_count: int
    total_price: float
    status: str
    special_requests: Optional[str]
    created_at: str

_reservations: dict[str, ReservationRecord] = {}


async def fetch_reservations(
    room_id: str,
    today: Optional[date] = None,
    window_days: Optional[int] = None,
) -> list[Reservation]:
    """
    Fetch the non-cancelled reservations of a room that overlap the window
    ``[today, today + window_days]``.
    """
    start = today or date.today()
    if window_days is None:
        window_days = settings.calendar.booking_window_days
    window_end = format_date(add_days(start, window_days))
    window_start = format_date(start)

    rows = [
        row
        for row in _reservations.values()
        if row["room_id"] == room_id
        and row["status"] != ReservationStatus.CANCELLED.value
        and row["check_in_date"] <= window_end
        and row["check_out_date"] >= window_start
    ]
    logger.debug(
        "Fetched %d reservation(s) for %s between %s and %s",
        len(rows), room_id, window_start, window_end,
    )
    return [Reservation.from_row(row) for row in rows]


def add_reservation(
    room_id: str,
    check_in: date,
    check_out: date,
    status: str = ReservationStatus.CONFIRMED.value,
    user_id: Optional[str] = None,
    guest_name: str = "",
    guest_count: int = 1,
    total_price: float = 0.0,
) -> ReservationRecord:
    """Store a reservation row as-is, without booking validation."""
    record: ReservationRecord = {
        "id": str(uuid.uuid4()),
        "room_id": room_id,
        "user_id": user_id,
        "guest_name": guest_name,
        "phone_number": "",
        "check_in_date": format_date(check_in),
        "check_out_date": format_date(check_out),
        "guest_count": guest_count,
        "total_price": total_price,
        "status": status,
        "special_requests": None,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    _reservations[record["id"]] = record
    return record


def _failure(message: str) -> BookingResponse:
    logger.info("Booking rejected: %s", message)
    return BookingResponse(success=False, message=message)


def submit_booking(request: BookingRequest) -> BookingResponse:
    """Validate a booking form and store it as a new reservation."""
    missing = [
        field_name
        for field_name, value in [
            ("guest name", request.guest_name),
            ("phone number", request.phone_number),
        ]
        if not value or not value.strip()
    ]
    if missing:
        return _failure(f"Please fill out all fields - missing: {', '.join(missing)}.")

    room = get_room(request.room_id)
    if room is None:
        return _failure(f"Room {request.room_id} not found.")
    if not room.is_available:
        return _failure("This room is not available for booking.")

    if request.guest_count < 1:
        return _failure("Number of guests must be at least 1.")
    if request.guest_count > room.capacity:
        return _failure(f"Number of guests cannot exceed {room.capacity}.")

    special = (request.special_requests or "").strip() or None
    max_len = settings.booking.max_special_request_length
    if special and len(special) > max_len:
        return _failure(f"Special requests must be at most {max_len} characters.")

    rate = room.price_per_night or settings.pricing.fallback_nightly_rate
    try:
        stay = quote(request.check_in, request.check_out, rate)
    except InvalidRangeError:
        return _failure("Check-out date must be after check-in date.")

    created_at = datetime.now(timezone.utc)
    record: ReservationRecord = {
        "id": str(uuid.uuid4()),
        "room_id": room.id,
        "user_id": request.user_id,
        "guest_name": request.guest_name.strip(),
        "phone_number": request.phone_number.strip(),
        "check_in_date": format_date(stay.check_in),
        "check_out_date": format_date(stay.check_out),
        "guest_count": request.guest_count,
        "total_price": stay.total_price,
        "status": settings.booking.initial_status,
        "special_requests": special,
        "created_at": created_at.isoformat(),
    }
    _reservations[record["id"]] = record
    logger.info(
        "Reservation created: %s for room %s from %s to %s (%d night(s))",
        record["id"], room.room_number, record["check_in_date"],
        record["check_out_date"], stay.nights,
    )

    return BookingResponse(
        success=True,
        message="Your booking has been created.",
        reservation_id=record["id"],
        status=ReservationStatus.coerce(record["status"]),
        quote=stay,
        created_at=created_at,
    )


def cancel_reservation(reservation_id: str) -> BookingResponse:
    """Cancel an existing reservation by id."""
    record = _reservations.get(reservation_id)
    if record is None:
        return BookingResponse(success=False, message=f"Booking {reservation_id} not found.")
    if record["status"] == ReservationStatus.CANCELLED.value:
        return BookingResponse(
            success=False,
            message=f"Booking {reservation_id} is already cancelled.",
            reservation_id=reservation_id,
            status=ReservationStatus.CANCELLED,
        )
    record["status"] = ReservationStatus.CANCELLED.value
    logger.info("Reservation cancelled: %s", reservation_id)
    return BookingResponse(
        success=True,
        message="Booking status updated to cancelled.",
        reservation_id=reservation_id,
        status=ReservationStatus.CANCELLED,
    )


def get_reservation(reservation_id: str) -> Optional[ReservationRecord]:
    """Retrieve a reservation by id."""
    return _reservations.get(reservation_id)


def list_user_reservations(user_id: str) -> list[ReservationRecord]:
    """A user's reservations, earliest check-in first."""
    return sorted(
        (r for r in _reservations.values() if r["user_id"] == user_id),
        key=lambda r: r["check_in_date"],
    )


def reset() -> None:
    """Clear all reservations. Used by test fixtures for isolation."""
    _reservations.clear()
