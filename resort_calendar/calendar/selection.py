"""
Check-in/check-out selection driven by day-tap events.

The selection moves through three phases:

    EMPTY --tap--> PARTIAL{check_in} --later tap--> COMPLETE{check_in, check_out}
      ^                 |                               |
      +---- re-tap check-in ----------------------------+
                                       COMPLETE --tap--> PARTIAL{tapped}

Rejected taps never change the state; they come back as a ``TapOutcome``
carrying the reason so the caller can show a notice.

Only the tapped endpoints are checked against the blocked index. Days
strictly between check-in and check-out are left to the booking backend
unless ``check_interior`` is requested.

Usage:
    state = SelectionState()
    state, outcome = on_day_tapped(state, date(2024, 6, 15), index)
    assert state.phase == SelectionPhase.PARTIAL
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from resort_calendar.calendar.blocked_index import BlockedDayIndex
from resort_calendar.utils import DayRange, as_calendar_date, days_inclusive

logger = logging.getLogger(__name__)


class SelectionPhase(str, Enum):
    """How many endpoints of the range have been picked."""
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


class RejectionReason(str, Enum):
    """Why a tapped day was not accepted."""
    DAY_BLOCKED = "day_blocked"
    CHECK_OUT_NOT_AFTER_CHECK_IN = "check_out_not_after_check_in"
    DAY_IN_PAST = "day_in_past"
    RANGE_CONTAINS_BLOCKED_DAY = "range_contains_blocked_day"


REJECTION_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.DAY_BLOCKED: "This day is already booked. Please choose another day.",
    RejectionReason.CHECK_OUT_NOT_AFTER_CHECK_IN: "Check-out date must be after check-in date.",
    RejectionReason.DAY_IN_PAST: "Past dates cannot be selected.",
    RejectionReason.RANGE_CONTAINS_BLOCKED_DAY: (
        "Your stay would include a day that is already booked."
    ),
}


@dataclass(frozen=True)
class SelectionState:
    """The in-progress check-in/check-out pick."""

    check_in: Optional[date] = None
    check_out: Optional[date] = None

    def __post_init__(self) -> None:
        if self.check_out is None:
            return
        if self.check_in is None:
            raise ValueError("check_out cannot be set without check_in")
        if self.check_in >= self.check_out:
            raise ValueError(
                f"check_in {self.check_in} must be before check_out {self.check_out}"
            )

    @property
    def phase(self) -> SelectionPhase:
        if self.check_in is None:
            return SelectionPhase.EMPTY
        if self.check_out is None:
            return SelectionPhase.PARTIAL
        return SelectionPhase.COMPLETE

    @property
    def is_empty(self) -> bool:
        return self.phase == SelectionPhase.EMPTY

    @property
    def is_complete(self) -> bool:
        return self.phase == SelectionPhase.COMPLETE

    def days(self) -> Optional[DayRange]:
        """Days covered by the selection; a partial pick covers one day."""
        if self.check_in is None:
            return None
        return days_inclusive(self.check_in, self.check_out or self.check_in)


@dataclass(frozen=True)
class TapOutcome:
    """Result of a day tap reported back to the UI."""

    accepted: bool
    reason: Optional[RejectionReason] = None
    message: str = ""

    @classmethod
    def accept(cls) -> "TapOutcome":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "TapOutcome":
        return cls(accepted=False, reason=reason, message=REJECTION_MESSAGES[reason])


def reset_selection() -> SelectionState:
    return SelectionState()


def _range_has_blocked_day(check_in: date, check_out: date, index: BlockedDayIndex) -> bool:
    return any(day in index for day in days_inclusive(check_in, check_out))


def on_day_tapped(
    state: SelectionState,
    tapped_day: date,
    blocked_index: BlockedDayIndex,
    *,
    min_date: Optional[date] = None,
    check_interior: bool = False,
) -> tuple[SelectionState, TapOutcome]:
    """
    Apply one day tap to the selection.

    Args:
        state: Current selection.
        tapped_day: The day the user tapped.
        blocked_index: Unavailable days of the current snapshot.
        min_date: Earliest selectable day, usually today.
        check_interior: Also reject a check-out whose range crosses a
            blocked day.

    Returns:
        The new selection and the outcome. On rejection the returned
        state is the unchanged input state.
    """
    day = as_calendar_date(tapped_day)

    if day in blocked_index:
        return state, TapOutcome.reject(RejectionReason.DAY_BLOCKED)

    if min_date is not None and day < as_calendar_date(min_date):
        return state, TapOutcome.reject(RejectionReason.DAY_IN_PAST)

    if state.check_in is not None and day == state.check_in:
        new_state = reset_selection()
    elif state.phase == SelectionPhase.PARTIAL:
        if day <= state.check_in:
            return state, TapOutcome.reject(RejectionReason.CHECK_OUT_NOT_AFTER_CHECK_IN)
        if check_interior and _range_has_blocked_day(state.check_in, day, blocked_index):
            return state, TapOutcome.reject(RejectionReason.RANGE_CONTAINS_BLOCKED_DAY)
        new_state = SelectionState(check_in=state.check_in, check_out=day)
    else:
        # EMPTY starts a pick; COMPLETE starts over from the tapped day
        new_state = SelectionState(check_in=day)

    logger.debug(
        "Selection transition: %s -> %s (tapped %s)",
        state.phase.value, new_state.phase.value, day,
    )
    return new_state, TapOutcome.accept()
