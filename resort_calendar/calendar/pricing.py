"""Nights-of-stay and total price for a confirmed date pair.

Totals are plain float multiplication with no currency rounding.
"""

import logging
from datetime import date

from resort_calendar.calendar.selection import SelectionState
from resort_calendar.schemas.booking_schema import StayQuote
from resort_calendar.utils import as_calendar_date, days_between

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """Raised when check-out is not after check-in."""


def quote(check_in: date, check_out: date, nightly_rate: float) -> StayQuote:
    """
    Price a stay.

    Raises:
        InvalidRangeError: If ``check_out <= check_in``.
        ValueError: If ``nightly_rate`` is negative.
    """
    check_in = as_calendar_date(check_in)
    check_out = as_calendar_date(check_out)
    if check_out <= check_in:
        raise InvalidRangeError(
            f"Check-out {check_out} must be after check-in {check_in}"
        )
    if nightly_rate < 0:
        raise ValueError(f"Nightly rate must be >= 0, got {nightly_rate}")

    nights = max(0, round(days_between(check_in, check_out)))
    total_price = nights * nightly_rate
    logger.debug("Quoted %d night(s) at %s = %s", nights, nightly_rate, total_price)
    return StayQuote(
        check_in=check_in,
        check_out=check_out,
        nights=nights,
        nightly_rate=nightly_rate,
        total_price=total_price,
    )


def quote_selection(selection: SelectionState, nightly_rate: float) -> StayQuote:
    """Price a selection; only a complete check-in/check-out pair can be quoted."""
    if not selection.is_complete:
        raise InvalidRangeError("Select both check-in and check-out dates first.")
    return quote(selection.check_in, selection.check_out, nightly_rate)
