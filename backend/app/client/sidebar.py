"""Hourly sidebar: what is planned for the current hour of today"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from app.models.plan import PlanTask
from app.services.retention import NO_VALUE
from app.utils.datekey import date_key_for


@dataclass
class HourNote:
    """Text shown for the current hour, from the day plan or a pinned note"""
    text: str
    source: str  # "plan" or "note"
    emoji: Optional[str] = None
    color: Optional[str] = None


@dataclass
class HourlySidebar:
    date_key: str
    hour: int
    hour_label: str
    notes: List[HourNote] = field(default_factory=list)
    tasks: List[PlanTask] = field(default_factory=list)
    urgent_tasks: List[PlanTask] = field(default_factory=list)


def format_hour_label(hour: int) -> str:
    """12-hour clock label, e.g. 0 -> '12:00 AM', 13 -> '1:00 PM'"""
    hour12 = 12 if hour % 12 == 0 else hour % 12
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour12}:00 {suffix}"


def build_hourly_sidebar(data_access, now: Optional[datetime] = None) -> HourlySidebar:
    """Collect the current hour's notes and all of today's tasks"""
    now = now or datetime.now()
    date_key = date_key_for(now)
    hour = now.hour
    sidebar = HourlySidebar(date_key=date_key, hour=hour, hour_label=format_hour_label(hour))

    plan = data_access.load_plan(date_key)
    if plan is not None:
        hour_text = plan.hourly_plans.get(str(hour))
        if hour_text:
            sidebar.notes.append(HourNote(text=hour_text, source="plan"))

    note = data_access.load_note(date_key)
    if note is not None and note.time == hour and note.text:
        sidebar.notes.append(HourNote(
            text=note.text,
            source="note",
            emoji=note.emoji if note.emoji != NO_VALUE else None,
            color=note.color,
        ))

    # completed tasks stay listed so they can be toggled back
    for task in plan.tasks if plan is not None else []:
        if task.urgent:
            sidebar.urgent_tasks.append(task)
        else:
            sidebar.tasks.append(task)
    return sidebar
