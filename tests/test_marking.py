"""Tests for merging blocked days and the selection into a render marking."""

from resort_calendar.calendar.blocked_index import BlockedDayIndex
from resort_calendar.calendar.marking import DayMarker, is_selectable, marker_for, render
from resort_calendar.calendar.selection import SelectionState
from tests.conftest import d

NO_BLOCKS = BlockedDayIndex()


class TestRenderSelection:
    def test_empty_selection_no_blocks(self, empty_selection):
        assert render(NO_BLOCKS, empty_selection) == {}

    def test_partial_selection_is_start_and_end(self):
        marking = render(NO_BLOCKS, SelectionState(check_in=d("2024-06-15")))
        assert marking == {
            "2024-06-15": DayMarker.SELECTION_START | DayMarker.SELECTION_END,
        }

    def test_complete_selection(self):
        selection = SelectionState(check_in=d("2024-06-15"), check_out=d("2024-06-18"))
        assert render(NO_BLOCKS, selection) == {
            "2024-06-15": DayMarker.SELECTION_START,
            "2024-06-16": DayMarker.SELECTION_MIDDLE,
            "2024-06-17": DayMarker.SELECTION_MIDDLE,
            "2024-06-18": DayMarker.SELECTION_END,
        }

    def test_two_night_selection_has_no_middle(self):
        selection = SelectionState(check_in=d("2024-06-15"), check_out=d("2024-06-16"))
        marking = render(NO_BLOCKS, selection)
        assert DayMarker.SELECTION_MIDDLE not in set(marking.values())


class TestRenderBlocked:
    def test_blocked_days_only(self, empty_selection, june_index):
        marking = render(june_index, empty_selection)
        assert set(marking) == set(june_index)
        assert all(marker == DayMarker.BLOCKED for marker in marking.values())

    def test_blocked_wins_inside_selection(self, june_index):
        selection = SelectionState(check_in=d("2024-06-08"), check_out=d("2024-06-14"))
        marking = render(june_index, selection)
        assert marking["2024-06-08"] == DayMarker.SELECTION_START
        assert marking["2024-06-09"] == DayMarker.SELECTION_MIDDLE
        assert marking["2024-06-10"] == DayMarker.BLOCKED
        assert marking["2024-06-12"] == DayMarker.BLOCKED
        assert marking["2024-06-13"] == DayMarker.SELECTION_MIDDLE
        assert marking["2024-06-14"] == DayMarker.SELECTION_END
        assert marking["2024-06-20"] == DayMarker.BLOCKED

    def test_render_is_pure(self, june_index):
        selection = SelectionState(check_in=d("2024-06-08"), check_out=d("2024-06-14"))
        first = render(june_index, selection)
        second = render(june_index, selection)
        assert first == second
        assert first is not second


class TestMarkerQueries:
    def test_marker_for_absent_day_is_none(self, june_index, empty_selection):
        marking = render(june_index, empty_selection)
        assert marker_for(marking, d("2024-06-30")) == DayMarker.NONE
        assert marker_for(marking, "2024-06-10") == DayMarker.BLOCKED

    def test_labels(self):
        assert DayMarker.NONE.labels() == ["none"]
        assert DayMarker.BLOCKED.labels() == ["blocked"]
        single = DayMarker.SELECTION_START | DayMarker.SELECTION_END
        assert single.labels() == ["selection-start", "selection-end"]

    def test_is_selectable(self, june_index):
        assert is_selectable(d("2024-06-13"), june_index)
        assert not is_selectable(d("2024-06-11"), june_index)

    def test_is_selectable_respects_min_date(self):
        assert not is_selectable(d("2024-06-01"), NO_BLOCKS, min_date=d("2024-06-02"))
        assert is_selectable(d("2024-06-02"), NO_BLOCKS, min_date=d("2024-06-02"))

    def test_is_selectable_accepts_iso_strings(self, june_index):
        assert is_selectable("2024-06-13", june_index, min_date="2024-06-01")
        assert not is_selectable("2024-06-11", june_index, min_date="2024-06-01")
        assert not is_selectable("2024-05-31", june_index, min_date=d("2024-06-01"))
