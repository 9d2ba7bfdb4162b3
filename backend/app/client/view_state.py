"""Immutable calendar view state and its transitions"""
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Optional


class ViewMode(str, Enum):
    CALENDAR = "calendar"
    TIMELINE = "timeline"


class ActionType(str, Enum):
    NEXT_MONTH = "next_month"
    PREV_MONTH = "prev_month"
    GO_TO_TODAY = "go_to_today"
    TOGGLE_VIEW = "toggle_view"
    TOGGLE_NOTES_LIST = "toggle_notes_list"
    SET_SEARCH = "set_search"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Any = None


@dataclass(frozen=True)
class ViewState:
    """What the calendar UI is showing; month is zero-based"""
    year: int
    month: int
    view: ViewMode = ViewMode.CALENDAR
    search_query: str = ""
    notes_list_open: bool = False

    @classmethod
    def for_date(cls, value: Optional[date] = None) -> "ViewState":
        value = value or date.today()
        return cls(year=value.year, month=value.month - 1)


def _shift_month(state: ViewState, direction: int) -> ViewState:
    month = state.month + direction
    year = state.year
    if month < 0:
        month, year = 11, year - 1
    elif month > 11:
        month, year = 0, year + 1
    return replace(state, year=year, month=month)


def _next_month(state: ViewState, action: Action) -> ViewState:
    return _shift_month(state, 1)


def _prev_month(state: ViewState, action: Action) -> ViewState:
    return _shift_month(state, -1)


def _go_to_today(state: ViewState, action: Action) -> ViewState:
    today = action.payload or date.today()
    return replace(state, year=today.year, month=today.month - 1)


def _toggle_view(state: ViewState, action: Action) -> ViewState:
    view = ViewMode.TIMELINE if state.view == ViewMode.CALENDAR else ViewMode.CALENDAR
    return replace(state, view=view, notes_list_open=False)


def _toggle_notes_list(state: ViewState, action: Action) -> ViewState:
    if state.notes_list_open:
        # closing the list always lands back on the calendar
        return replace(state, notes_list_open=False, view=ViewMode.CALENDAR)
    return replace(state, notes_list_open=True)


def _set_search(state: ViewState, action: Action) -> ViewState:
    return replace(state, search_query=(action.payload or "").strip().lower())


REDUCERS: Dict[ActionType, Callable[[ViewState, Action], ViewState]] = {
    ActionType.NEXT_MONTH: _next_month,
    ActionType.PREV_MONTH: _prev_month,
    ActionType.GO_TO_TODAY: _go_to_today,
    ActionType.TOGGLE_VIEW: _toggle_view,
    ActionType.TOGGLE_NOTES_LIST: _toggle_notes_list,
    ActionType.SET_SEARCH: _set_search,
}


def reduce(state: ViewState, action: Action) -> ViewState:
    """Apply ``action`` to ``state``, returning a new state"""
    try:
        reducer = REDUCERS[ActionType(action.type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown action: {action.type!r}") from None
    return reducer(state, action)
