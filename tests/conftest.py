"""Shared test fixtures and helpers."""

from datetime import date
from typing import Optional

import pytest

from resort_calendar.calendar.blocked_index import build_blocked_index
from resort_calendar.calendar.selection import SelectionState
from resort_calendar.schemas.booking_schema import Reservation, ReservationStatus
from resort_calendar.tools import reservations as reservation_store
from resort_calendar.tools import rooms as room_store


@pytest.fixture(autouse=True)
def reset_stores():
    room_store.reset()
    reservation_store.reset()
    yield
    room_store.reset()
    reservation_store.reset()


@pytest.fixture
def empty_selection():
    return SelectionState()


@pytest.fixture
def june_reservations():
    return [
        make_reservation("2024-06-10", "2024-06-12"),
        make_reservation("2024-06-20", "2024-06-21", ReservationStatus.PENDING),
        make_reservation("2024-06-15", "2024-06-18", ReservationStatus.CANCELLED),
    ]


@pytest.fixture
def june_index(june_reservations):
    return build_blocked_index(june_reservations)


def make_reservation(
    start: str,
    end: str,
    status: ReservationStatus = ReservationStatus.CONFIRMED,
    room_id: Optional[str] = "room-101",
) -> Reservation:
    """Helper to create a Reservation from ISO day strings."""
    return Reservation(start_date=start, end_date=end, status=status, room_id=room_id)


def d(value: str) -> date:
    """Shorthand for an ISO calendar day."""
    return date.fromisoformat(value)
