"""
Blocked-day index built from a reservation snapshot.

A day is blocked iff it falls inside the inclusive [start, end] span of
at least one reservation that has not been cancelled. The index is
rebuilt wholesale from every fresh snapshot and never patched.

Usage:
    index = build_blocked_index(reservations)
    if "2024-06-11" in index:
        ...
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Union

from resort_calendar.schemas.booking_schema import Reservation
from resort_calendar.utils import days_inclusive, format_date

logger = logging.getLogger(__name__)

UNAVAILABLE = "unavailable"


def _key(day: Union[date, str]) -> str:
    return day if isinstance(day, str) else format_date(day)


@dataclass(frozen=True)
class BlockedDayIndex:
    """Immutable set of unavailable days keyed by ``YYYY-MM-DD``."""

    days: frozenset[str] = frozenset()

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, (date, str)):
            return False
        return _key(day) in self.days

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.days))

    def is_blocked(self, day: Union[date, str]) -> bool:
        return _key(day) in self.days

    def to_dict(self) -> dict[str, str]:
        """Export as the ``{day: "unavailable"}`` mapping calendars consume."""
        return {key: UNAVAILABLE for key in sorted(self.days)}


def build_blocked_index(reservations: Iterable[Reservation]) -> BlockedDayIndex:
    """Union the day spans of every non-cancelled reservation."""
    blocked: set[str] = set()
    for reservation in reservations:
        if not reservation.is_active:
            continue
        if reservation.end_date < reservation.start_date:
            logger.warning(
                "Skipping reservation %s with end %s before start %s",
                reservation.reservation_id or "<unsaved>",
                reservation.end_date,
                reservation.start_date,
            )
            continue
        blocked.update(
            format_date(day)
            for day in days_inclusive(reservation.start_date, reservation.end_date)
        )

    logger.debug("Blocked index rebuilt: %d day(s) unavailable", len(blocked))
    return BlockedDayIndex(frozenset(blocked))
