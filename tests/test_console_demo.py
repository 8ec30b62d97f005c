"""Tests for the offline console demo entry point."""

from datetime import date

import pytest

import console_demo
from resort_calendar.tools.reservations import fetch_reservations
from resort_calendar.tools.rooms import RoomNotFoundError


class TestConsoleDemo:
    def test_unknown_room_exits_with_message(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["console_demo.py", "--room", "room-999"])
        with pytest.raises(SystemExit) as exc_info:
            console_demo.main()
        assert exc_info.value.code == 1
        assert "Room room-999 not found." in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unknown_room_seeds_nothing(self):
        with pytest.raises(RoomNotFoundError):
            console_demo.ConsoleSession("room-999", today=date(2024, 6, 1))
        assert await fetch_reservations("room-999", today=date(2024, 6, 1)) == []

    def test_resolve_day_offsets(self):
        session = console_demo.ConsoleSession("room-101", today=date(2024, 6, 1))
        assert session._resolve_day("+3") == "2024-06-04"
        assert session._resolve_day("+x") == "+x"
        assert session._resolve_day("quote") == "quote"
