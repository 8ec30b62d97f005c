"""
Centralized configuration with environment variable overrides.

Booking-window, selection policy, booking and pricing defaults are all
configurable here. Calendar and tool logic read from ``settings`` instead
of hardcoding values.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from resort_calendar.logging_context import LOG_DATE_FORMAT, LOG_FORMAT, session_handler

load_dotenv()

logger = logging.getLogger(__name__)

KNOWN_STATUSES = ("pending", "confirmed", "cancelled", "other")


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a true/false flag from an env var."""
    raw = os.getenv(env_var, default).strip().lower()
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class CalendarConfig:
    """Availability calendar settings."""

    booking_window_days: int = _safe_int("BOOKING_WINDOW_DAYS", "60")
    allow_past_dates: bool = _safe_bool("ALLOW_PAST_DATES", "false")
    validate_interior_days: bool = _safe_bool("VALIDATE_INTERIOR_DAYS", "false")
    tap_history_limit: int = _safe_int("TAP_HISTORY_LIMIT", "200")


@dataclass(frozen=True)
class BookingConfig:
    """Defaults applied when a booking is submitted."""

    default_guest_count: int = _safe_int("DEFAULT_GUEST_COUNT", "1")
    max_special_request_length: int = _safe_int("MAX_SPECIAL_REQUEST_LENGTH", "500")
    initial_status: str = os.getenv("INITIAL_BOOKING_STATUS", "pending")


@dataclass(frozen=True)
class PricingConfig:
    """Currency and rate fallbacks for stay quotes."""

    currency: str = os.getenv("CURRENCY", "USD")
    fallback_nightly_rate: float = _safe_float("FALLBACK_NIGHTLY_RATE", "0.0")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    booking: BookingConfig = field(default_factory=BookingConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "Kiatt Resort & Spa")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.calendar.booking_window_days < 1:
        raise ValueError(
            f"BOOKING_WINDOW_DAYS must be >= 1, got {config.calendar.booking_window_days}"
        )
    if config.calendar.tap_history_limit < 1:
        raise ValueError(
            f"TAP_HISTORY_LIMIT must be >= 1, got {config.calendar.tap_history_limit}"
        )
    if config.booking.default_guest_count < 1:
        raise ValueError(
            f"DEFAULT_GUEST_COUNT must be >= 1, got {config.booking.default_guest_count}"
        )
    if config.booking.max_special_request_length < 1:
        raise ValueError(
            "MAX_SPECIAL_REQUEST_LENGTH must be >= 1, "
            f"got {config.booking.max_special_request_length}"
        )
    if config.booking.initial_status not in KNOWN_STATUSES:
        raise ValueError(
            f"INITIAL_BOOKING_STATUS must be one of {list(KNOWN_STATUSES)}, "
            f"got {config.booking.initial_status!r}"
        )
    if config.pricing.fallback_nightly_rate < 0:
        raise ValueError(
            f"FALLBACK_NIGHTLY_RATE must be >= 0, got {config.pricing.fallback_nightly_rate}"
        )
    currency = config.pricing.currency
    if len(currency) != 3 or not currency.isalpha() or not currency.isupper():
        raise ValueError(f"CURRENCY must be a 3-letter ISO code, got {currency!r}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[session_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
