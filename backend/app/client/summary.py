"""Monthly summary and timeline/search over stored notes"""
import calendar
from dataclasses import dataclass
from datetime import date
from typing import Dict, List
from app.models.note import Note
from app.utils.datekey import format_date_key, is_date_key, parse_date_key


@dataclass
class MonthlySummary:
    total_notes: int = 0
    important_notes: int = 0  # red notes
    tasks_completed: int = 0
    total_tasks: int = 0

    @property
    def tasks_label(self) -> str:
        return f"{self.tasks_completed} / {self.total_tasks}"


@dataclass
class TimelineEntry:
    date_key: str
    date: date
    note: Note


def summarize_month(data_access, year: int, month: int) -> MonthlySummary:
    """
    Count notes and tasks for a month

    Args:
        data_access: Planner data access layer
        year: Year
        month: Zero-based month index

    Returns:
        Totals across note checklists and daily plan tasks
    """
    summary = MonthlySummary()
    days_in_month = calendar.monthrange(year, month + 1)[1]

    for day in range(1, days_in_month + 1):
        date_key = format_date_key(year, month, day)

        note = data_access.load_note(date_key)
        if note is not None and note.has_content():
            summary.total_notes += 1
            if note.color == "red":
                summary.important_notes += 1
            for item in note.checklist:
                summary.total_tasks += 1
                summary.tasks_completed += int(item.completed)

        plan = data_access.load_plan(date_key)
        if plan is not None:
            for task in plan.tasks:
                summary.total_tasks += 1
                summary.tasks_completed += int(task.completed)

    return summary


def matches_query(note: Note, query: str) -> bool:
    """Case-insensitive match on note text or any checklist item text"""
    query = query.lower()
    if note.text and query in note.text.lower():
        return True
    return any(item.text and query in item.text.lower() for item in note.checklist)


def build_timeline(notes: Dict[str, Note], search_query: str = "") -> List[TimelineEntry]:
    """Notes with content in date order, filtered by ``search_query`` when given"""
    entries = []
    for date_key, note in notes.items():
        if not is_date_key(date_key) or note is None or not note.has_content():
            continue
        if search_query and not matches_query(note, search_query):
            continue
        year, month, day = parse_date_key(date_key)
        try:
            entry_date = date(year, month + 1, day)
        except ValueError:
            continue  # e.g. planner-2024-02-31
        entries.append(TimelineEntry(date_key=date_key, date=entry_date, note=note))
    entries.sort(key=lambda entry: entry.date)
    return entries
