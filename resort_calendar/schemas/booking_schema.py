"""Reservation, quote and booking submission data models."""

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resort_calendar.utils import parse_date


class ReservationStatus(str, Enum):
    """Lifecycle status of a room reservation."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: Any) -> "ReservationStatus":
        """Map a raw backend status to a known member, ``OTHER`` if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


class Reservation(BaseModel):
    """One existing booking of a single room, read as a snapshot."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    status: ReservationStatus = ReservationStatus.PENDING
    room_id: Optional[str] = None
    reservation_id: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_iso_day(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_date(value)
        if isinstance(value, datetime):
            return value.date()
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> ReservationStatus:
        return ReservationStatus.coerce(value)

    @property
    def is_active(self) -> bool:
        return self.status != ReservationStatus.CANCELLED

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Reservation":
        """Build from a ``room_bookings`` row.

        Dates are parsed before validation so a malformed day surfaces as
        ``InvalidDateFormat`` rather than a pydantic error.
        """
        return cls(
            start_date=parse_date(row["check_in_date"]),
            end_date=parse_date(row["check_out_date"]),
            status=row.get("status"),
            room_id=row.get("room_id"),
            reservation_id=row.get("id"),
        )


class StayQuote(BaseModel):
    """Nights and total price for a confirmed check-in/check-out pair."""

    model_config = ConfigDict(frozen=True)

    check_in: date
    check_out: date
    nights: int = Field(ge=0)
    nightly_rate: float = Field(ge=0)
    total_price: float = Field(ge=0)


class BookingRequest(BaseModel):
    """Booking form data handed to the submission collaborator."""
    room_id: str
    user_id: str
    guest_name: str
    phone_number: str
    guest_count: int
    check_in: date
    check_out: date
    special_requests: Optional[str] = None


class BookingResponse(BaseModel):
    """Booking submission or cancellation result."""
    success: bool
    message: str
    reservation_id: Optional[str] = None
    status: Optional[ReservationStatus] = None
    quote: Optional[StayQuote] = None
    created_at: Optional[datetime] = None
