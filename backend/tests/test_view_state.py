"""Tests for calendar view state transitions"""
from datetime import date
import pytest
from app.client.view_state import Action, ActionType, ViewMode, ViewState, reduce


def test_next_month_rolls_over_year():
    state = reduce(ViewState(year=2024, month=11), Action(ActionType.NEXT_MONTH))
    assert (state.year, state.month) == (2025, 0)


def test_prev_month_rolls_back_year():
    state = reduce(ViewState(year=2024, month=0), Action(ActionType.PREV_MONTH))
    assert (state.year, state.month) == (2023, 11)


def test_go_to_today():
    state = reduce(ViewState(year=1999, month=4), Action(ActionType.GO_TO_TODAY, date(2024, 3, 5)))
    assert (state.year, state.month) == (2024, 2)
    assert ViewState.for_date(date(2024, 3, 5)) == ViewState(year=2024, month=2)


def test_toggle_view_closes_notes_list():
    state = ViewState(year=2024, month=2, notes_list_open=True)
    state = reduce(state, Action(ActionType.TOGGLE_VIEW))
    assert state.view == ViewMode.TIMELINE
    assert state.notes_list_open is False
    assert reduce(state, Action(ActionType.TOGGLE_VIEW)).view == ViewMode.CALENDAR


def test_closing_notes_list_returns_to_calendar():
    state = ViewState(year=2024, month=2, view=ViewMode.TIMELINE)
    opened = reduce(state, Action(ActionType.TOGGLE_NOTES_LIST))
    assert opened.notes_list_open is True
    assert opened.view == ViewMode.TIMELINE

    closed = reduce(opened, Action(ActionType.TOGGLE_NOTES_LIST))
    assert closed.notes_list_open is False
    assert closed.view == ViewMode.CALENDAR


def test_search_query_is_normalised():
    state = reduce(ViewState(year=2024, month=2), Action(ActionType.SET_SEARCH, "  Pray "))
    assert state.search_query == "pray"
    assert reduce(state, Action(ActionType.SET_SEARCH, None)).search_query == ""


def test_state_is_not_mutated():
    state = ViewState(year=2024, month=2)
    reduce(state, Action(ActionType.NEXT_MONTH))
    assert state.month == 2


def test_unknown_action_raises():
    with pytest.raises(ValueError):
        reduce(ViewState(year=2024, month=2), Action("jump"))
