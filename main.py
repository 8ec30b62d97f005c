"""
Availability calendar entry point.

Starts the offline console demo against the mock room and reservation
stores.

Usage:
    Interactive:  python main.py
    Scripted:     python main.py --scenario booking
"""

import logging

from resort_calendar.config import settings

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    from console_demo import main

    logger.debug("Starting console demo for %s", settings.app_name)
    main()
