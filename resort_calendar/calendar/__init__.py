from resort_calendar.calendar.blocked_index import BlockedDayIndex, build_blocked_index
from resort_calendar.calendar.marking import DayMarker, is_selectable, marker_for, render
from resort_calendar.calendar.pricing import InvalidRangeError, quote, quote_selection
from resort_calendar.calendar.selection import (
    RejectionReason,
    SelectionPhase,
    SelectionState,
    TapOutcome,
    on_day_tapped,
    reset_selection,
)

__all__ = [
    "BlockedDayIndex",
    "build_blocked_index",
    "DayMarker",
    "render",
    "marker_for",
    "is_selectable",
    "InvalidRangeError",
    "quote",
    "quote_selection",
    "SelectionState",
    "SelectionPhase",
    "RejectionReason",
    "TapOutcome",
    "on_day_tapped",
    "reset_selection",
]
