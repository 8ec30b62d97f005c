"""
Booking-calendar session for one room screen.

Holds the last fetched reservation snapshot, its blocked-day index and
the current selection as immutable values, replacing them wholesale on
each reload or tap. Rendering always recomputes from those two values.

Usage:
    session = CalendarSession("room-101")
    await session.load()
    session.tap("2024-06-10")
    session.tap("2024-06-13")
    session.quote().total_price
"""

import uuid
from collections import deque
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from resort_calendar.calendar.blocked_index import BlockedDayIndex, build_blocked_index
from resort_calendar.calendar.marking import RenderMarking, is_selectable, render
from resort_calendar.calendar.pricing import quote_selection
from resort_calendar.calendar.selection import (
    SelectionState,
    TapOutcome,
    on_day_tapped,
    reset_selection,
)
from resort_calendar.config import settings
from resort_calendar.logging_context import get_session_logger, session_context
from resort_calendar.schemas.booking_schema import (
    BookingRequest,
    BookingResponse,
    Reservation,
    StayQuote,
)
from resort_calendar.schemas.room_schema import Room
from resort_calendar.tools.reservations import fetch_reservations, submit_booking
from resort_calendar.tools.rooms import RoomNotFoundError, get_room
from resort_calendar.utils import DateLike, ensure_date

logger = get_session_logger(__name__)


class SessionNotLoadedError(RuntimeError):
    """Raised when the session is used before ``load()`` completed."""


@dataclass(frozen=True)
class TapEntry:
    """Recorded history entry for one day tap."""
    day: date
    outcome: TapOutcome
    selection: SelectionState
    tapped_at: datetime


class CalendarSession:
    """
    Availability calendar state for a single room.

    ``load()`` must complete before taps are handled; until then no day is
    known to be blocked.
    """

    def __init__(
        self,
        room_id: str,
        today: Optional[date] = None,
        session_id: Optional[str] = None,
        history_limit: Optional[int] = None,
    ) -> None:
        self.room_id = room_id
        self.today = today or date.today()
        self.session_id = session_id or f"CAL-{uuid.uuid4().hex[:6]}"
        self._room: Optional[Room] = None
        self._reservations: list[Reservation] = []
        self._blocked = BlockedDayIndex()
        self._selection = SelectionState()
        self._history: deque[TapEntry] = deque(
            maxlen=history_limit or settings.calendar.tap_history_limit
        )

    @property
    def room(self) -> Room:
        if self._room is None:
            raise SessionNotLoadedError(f"Session for {self.room_id} has not been loaded")
        return self._room

    @property
    def blocked_index(self) -> BlockedDayIndex:
        return self._blocked

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def reservations(self) -> list[Reservation]:
        return list(self._reservations)

    @property
    def min_date(self) -> Optional[date]:
        return None if settings.calendar.allow_past_dates else self.today

    async def load(self) -> None:
        """Fetch the room and its reservation snapshot, then rebuild the index."""
        with session_context(self.session_id):
            room = get_room(self.room_id)
            if room is None:
                raise RoomNotFoundError(f"Room {self.room_id} not found.")

            reservations = await fetch_reservations(self.room_id, today=self.today)
            self._room = room
            self._reservations = reservations
            self._blocked = build_blocked_index(reservations)
            logger.info(
                "Loaded room %s: %d reservation(s), %d blocked day(s)",
                room.room_number, len(reservations), len(self._blocked),
            )

    def tap(self, day: DateLike) -> TapOutcome:
        """Handle a day tap and record it in the history."""
        with session_context(self.session_id):
            tapped = ensure_date(day)
            self._selection, outcome = on_day_tapped(
                self._selection,
                tapped,
                self._blocked,
                min_date=self.min_date,
                check_interior=settings.calendar.validate_interior_days,
            )
            self._history.append(TapEntry(
                day=tapped,
                outcome=outcome,
                selection=self._selection,
                tapped_at=datetime.now(timezone.utc),
            ))
            if outcome.accepted:
                logger.debug("Tap on %s accepted: %s", tapped, self._selection.phase.value)
            else:
                logger.info("Tap on %s rejected: %s", tapped, outcome.reason.value)
        return outcome

    def reset(self) -> None:
        self._selection = reset_selection()

    @property
    def marking(self) -> RenderMarking:
        return render(self._blocked, self._selection)

    def is_selectable(self, day: DateLike) -> bool:
        return is_selectable(ensure_date(day), self._blocked, self.min_date)

    def quote(self) -> StayQuote:
        """Price the current selection at the room's nightly rate."""
        rate = self.room.price_per_night or settings.pricing.fallback_nightly_rate
        return quote_selection(self._selection, rate)

    async def confirm_booking(
        self,
        user_id: str,
        guest_name: str,
        phone_number: str,
        guest_count: Optional[int] = None,
        special_requests: Optional[str] = None,
    ) -> BookingResponse:
        """
        Submit the current selection as a booking.

        On success the selection is cleared and the reservation snapshot is
        reloaded so the new stay shows as blocked.
        """
        if not self._selection.is_complete:
            return BookingResponse(
                success=False,
                message="Please select check-in and check-out dates first.",
            )

        request = BookingRequest(
            room_id=self.room.id,
            user_id=user_id,
            guest_name=guest_name,
            phone_number=phone_number,
            guest_count=(
                settings.booking.default_guest_count if guest_count is None else guest_count
            ),
            check_in=self._selection.check_in,
            check_out=self._selection.check_out,
            special_requests=special_requests,
        )
        with session_context(self.session_id):
            response = submit_booking(request)
            if response.success:
                self.reset()
                await self.load()
        return response

    def get_history(self) -> list[TapEntry]:
        """Return the most recent taps, oldest first, up to the history limit."""
        return list(self._history)

    def get_selection_trace(self) -> list[str]:
        """Return the ordered list of selection phases after each tap."""
        return [entry.selection.phase.value for entry in self._history]
