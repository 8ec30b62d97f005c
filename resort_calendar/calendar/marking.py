"""
Render marking: blocked days merged with the current selection.

``render`` is a pure function of its two inputs. Blocked days win over
the selection, so a range that straddles a booked day shows that day as
blocked inside the highlighted stay.
"""

from datetime import date
from enum import Flag
from typing import Optional, Union

from resort_calendar.calendar.blocked_index import BlockedDayIndex
from resort_calendar.calendar.selection import SelectionState
from resort_calendar.utils import DateLike, ensure_date, format_date


class DayMarker(Flag):
    """Display classification of one calendar day.

    A single-day (partial) selection is ``SELECTION_START | SELECTION_END``.
    """

    NONE = 0
    BLOCKED = 1
    SELECTION_START = 2
    SELECTION_MIDDLE = 4
    SELECTION_END = 8

    def labels(self) -> list[str]:
        """Display names of the set markers, e.g. ``["selection-start"]``."""
        if not self:
            return ["none"]
        return [
            member.name.lower().replace("_", "-")
            for member in (
                DayMarker.BLOCKED,
                DayMarker.SELECTION_START,
                DayMarker.SELECTION_MIDDLE,
                DayMarker.SELECTION_END,
            )
            if member in self
        ]


RenderMarking = dict[str, DayMarker]


def render(blocked_index: BlockedDayIndex, selection: SelectionState) -> RenderMarking:
    """Build the per-day marking for the calendar."""
    marking: RenderMarking = {}

    selected = selection.days()
    if selected is not None:
        first, last = selected.start, selected.end
        for day in selected:
            marker = DayMarker.NONE
            if day == first:
                marker |= DayMarker.SELECTION_START
            if day == last:
                marker |= DayMarker.SELECTION_END
            if not marker:
                marker = DayMarker.SELECTION_MIDDLE
            marking[format_date(day)] = marker

    for key in blocked_index:
        marking[key] = DayMarker.BLOCKED

    return marking


def marker_for(marking: RenderMarking, day: Union[date, str]) -> DayMarker:
    key = day if isinstance(day, str) else format_date(day)
    return marking.get(key, DayMarker.NONE)


def is_selectable(
    day: DateLike, blocked_index: BlockedDayIndex, min_date: Optional[DateLike] = None
) -> bool:
    """Whether a tap on ``day`` could be accepted as an endpoint."""
    day = ensure_date(day)
    if day in blocked_index:
        return False
    return min_date is None or day >= ensure_date(min_date)
