"""Per-session log correlation for booking-calendar screens.

Every calendar session owns a short ID (``CAL-xxxxxx``). Work done on
behalf of a session runs inside ``session_context`` so that records
emitted meanwhile are stamped with that ID, even when several sessions
interleave in one process. ``session_handler`` builds the root handler
that prints it.

Usage:
    from resort_calendar.logging_context import get_session_logger, session_context

    logger = get_session_logger(__name__)
    with session_context("CAL-abc123"):
        logger.info("Day tapped")  # ... [CAL-abc123]: Day tapped
"""

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, TextIO

NO_SESSION_ID = "-"

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s [%(session_id)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_session_id: ContextVar[str] = ContextVar("session_id", default=NO_SESSION_ID)


def set_session_id(session_id: str) -> None:
    """Bind a session ID to the current context until it is replaced."""
    _session_id.set(session_id)


def get_session_id() -> str:
    return _session_id.get()


@contextmanager
def session_context(session_id: str) -> Iterator[None]:
    """Stamp records with ``session_id`` for the duration of the block.

    The previous ID is restored on exit, so nested or interleaved
    sessions never leak their ID into each other's records.
    """
    token = _session_id.set(session_id)
    try:
        yield
    finally:
        _session_id.reset(token)


class SessionIdFilter(logging.Filter):
    """Adds ``session_id`` to records that do not carry one yet."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def session_handler(stream: Optional[TextIO] = None) -> logging.Handler:
    """Stream handler that fills ``session_id`` on every record it emits,
    including records propagated from loggers outside this package."""
    handler = logging.StreamHandler(stream)
    handler.addFilter(SessionIdFilter())
    return handler


def get_session_logger(name: str) -> logging.Logger:
    """Return a logger with the SessionIdFilter attached.

    Every handler then sees ``session_id``, including ones installed
    without a filter of their own.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SessionIdFilter) for f in logger.filters):
        logger.addFilter(SessionIdFilter())
    return logger
