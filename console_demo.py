"""
Offline console demo: walks through the room availability calendar.

Uses the real blocked-day index, selection state machine, render marking
and mock room/reservation stores. No backend, no network calls.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario blocked --room room-204
"""

import argparse
import asyncio
import calendar
from datetime import date
from typing import Optional

from resort_calendar.calendar.marking import DayMarker, marker_for
from resort_calendar.calendar.pricing import InvalidRangeError
from resort_calendar.calendar.session import CalendarSession
from resort_calendar.config import settings
from resort_calendar.tools.reservations import add_reservation
from resort_calendar.tools.rooms import RoomNotFoundError, get_room
from resort_calendar.utils import InvalidDateFormat, add_days

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

DEMO_USER_ID = "demo-user"


class ConsoleSession:
    """Drives a CalendarSession from the terminal."""

    def __init__(self, room_id: str, today: Optional[date] = None) -> None:
        if get_room(room_id) is None:
            raise RoomNotFoundError(f"Room {room_id} not found.")
        self.today = today or date.today()
        self.calendar = CalendarSession(room_id, today=self.today)
        self._seed_demo_bookings(room_id)

    def _seed_demo_bookings(self, room_id: str) -> None:
        add_reservation(room_id, add_days(self.today, 3), add_days(self.today, 5))
        add_reservation(room_id, add_days(self.today, 12), add_days(self.today, 13),
                        status="pending")
        add_reservation(room_id, add_days(self.today, 8), add_days(self.today, 9),
                        status="cancelled")

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    # Day offsets from today for --scenario
    SCENARIOS: dict[str, list[str]] = {
        "booking": ["+6", "+10", "quote", "book"],
        "blocked": ["+4", "+1", "+1", "+14", "quote"],
        "reset": ["+6", "+6", "+7", "+2", "+6", "+15"],
    }

    def _resolve_day(self, token: str) -> str:
        if token.startswith("+") and token[1:].isdigit():
            return add_days(self.today, int(token[1:])).isoformat()
        return token

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        asyncio.run(self.calendar.load())
        self._banner(f"Scenario: {scenario}")
        self.print_month()

        for step in steps:
            print(f"\n{BLUE}[Guest] {RESET}{step}")
            self._process_input(self._resolve_day(step))
            self.system_log(f"Selection: {self.calendar.selection.phase.value}")

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{DIM}  Selection trace: {' -> '.join(self.calendar.get_selection_trace())}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run(self) -> None:
        asyncio.run(self.calendar.load())
        self._banner("Type a day (YYYY-MM-DD or +N), 'quote', 'book', 'reset' or 'quit'")
        self.print_month()

        while True:
            user_input = input(f"\n{BLUE}[Guest] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            self._process_input(self._resolve_day(user_input))

    def _banner(self, subtitle: str) -> None:
        room = self.calendar.room
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.app_name.upper()} - Room {room.room_number} ({room.room_type}){RESET}")
        print(f"{BOLD}  {room.price_per_night} {settings.pricing.currency}/night, "
              f"up to {room.capacity} guest(s){RESET}")
        print(f"{BOLD}  {subtitle}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def _process_input(self, text: str) -> None:
        command = text.lower()
        if command == "reset":
            self.calendar.reset()
            self.say("Selection cleared.")
        elif command == "quote":
            self._show_quote()
            return
        elif command == "book":
            self._book()
            return
        else:
            try:
                outcome = self.calendar.tap(text)
            except InvalidDateFormat as exc:
                print(f"{RED}{exc}{RESET}")
                return
            if not outcome.accepted:
                print(f"{YELLOW}{outcome.message}{RESET}")
                return
        self.print_month()

    def _show_quote(self) -> None:
        try:
            stay = self.calendar.quote()
        except InvalidRangeError as exc:
            print(f"{YELLOW}{exc}{RESET}")
            return
        self.say(
            f"{stay.nights} night(s) from {stay.check_in} to {stay.check_out}: "
            f"{stay.total_price} {settings.pricing.currency}"
        )

    def _book(self) -> None:
        response = asyncio.run(self.calendar.confirm_booking(
            user_id=DEMO_USER_ID, guest_name="Demo Guest", phone_number="+84 901 234 567",
        ))
        colour = GREEN if response.success else YELLOW
        print(f"{colour}{response.message}{RESET}")
        if response.success:
            self.print_month()

    def print_month(self) -> None:
        """Print the month grid containing today, coloured by render marking."""
        marking = self.calendar.marking
        year, month = self.today.year, self.today.month
        print(f"\n{BOLD}{calendar.month_name[month]} {year}{RESET}")
        print("Mo Tu We Th Fr Sa Su")
        for week in calendar.Calendar().monthdatescalendar(year, month):
            cells = []
            for day in week:
                label = f"{day.day:2d}"
                if day.month != month:
                    cells.append("  ")
                    continue
                marker = marker_for(marking, day)
                if DayMarker.BLOCKED in marker:
                    cells.append(f"{RED}{label}{RESET}")
                elif DayMarker.SELECTION_START in marker or DayMarker.SELECTION_END in marker:
                    cells.append(f"{BOLD}{BLUE}{label}{RESET}")
                elif DayMarker.SELECTION_MIDDLE in marker:
                    cells.append(f"{BLUE}{label}{RESET}")
                elif not self.calendar.is_selectable(day):
                    cells.append(f"{DIM}{label}{RESET}")
                else:
                    cells.append(label)
            print(" ".join(cells))


def main() -> None:
    parser = argparse.ArgumentParser(description="Room availability calendar demo")
    parser.add_argument("--scenario", choices=sorted(ConsoleSession.SCENARIOS))
    parser.add_argument("--room", default="room-101")
    args = parser.parse_args()

    try:
        session = ConsoleSession(args.room)
    except RoomNotFoundError as exc:
        print(f"{RED}{exc}{RESET}")
        raise SystemExit(1) from None

    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
