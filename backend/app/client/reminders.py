"""Reminder checking for notes with a reminder timestamp"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional
from dateutil import parser as date_parser
from app.config import settings
from app.models.note import Note
from app.utils.datekey import format_date_display, is_date_key, parse_date_key
from app.utils.monitoring import StructuredLogger

REMINDER_TITLE = "Daily Gospel Planner Reminder"


@dataclass(frozen=True)
class Reminder:
    """A reminder notification ready to be shown"""
    date_key: str
    title: str
    body: str
    due_at: datetime


Notifier = Callable[[Reminder], None]


def log_notifier(reminder: Reminder) -> None:
    """Default notifier: emit the reminder as a structured log event"""
    StructuredLogger.log_event(
        "reminder_due",
        f"{reminder.title}: {reminder.body}",
        date_key=reminder.date_key,
        metadata={"due_at": reminder.due_at.isoformat()},
    )


def parse_reminder_time(value: str) -> Optional[datetime]:
    """Parse an ISO-8601 reminder timestamp; naive values are taken as UTC"""
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_reminder(date_key: str, note: Note, due_at: datetime) -> Reminder:
    year, month, day = parse_date_key(date_key)
    return Reminder(
        date_key=date_key,
        title=REMINDER_TITLE,
        body=f"{format_date_display(year, month, day)}: {note.text or 'You have a reminder!'}",
        due_at=due_at,
    )


class ReminderChecker:
    """
    Polls notes for reminders due within the next window

    A reminder fires at most once per marker lifetime: after it is shown an
    "already shown" marker is kept for ``shown_ttl`` so that repeated polls in
    the same window do not notify twice.
    """

    def __init__(
        self,
        data_access,
        notifier: Notifier = log_notifier,
        window: Optional[timedelta] = None,
        shown_ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.data_access = data_access
        self.notifier = notifier
        self.window = window if window is not None else timedelta(seconds=settings.REMINDER_WINDOW_SECONDS)
        self.shown_ttl = (
            shown_ttl if shown_ttl is not None else timedelta(seconds=settings.REMINDER_SHOWN_TTL_SECONDS)
        )
        self.clock = clock
        self._shown_until: Dict[str, datetime] = {}

    def _expire_markers(self, now: datetime) -> None:
        for key in [key for key, until in self._shown_until.items() if until <= now]:
            del self._shown_until[key]

    def already_shown(self, date_key: str) -> bool:
        return date_key in self._shown_until

    def check(self, now: Optional[datetime] = None) -> List[Reminder]:
        """
        Notify every reminder due in ``(now, now + window]`` not shown yet

        Returns:
            The reminders that were shown on this call
        """
        now = now or self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self._expire_markers(now)

        shown = []
        for date_key, note in sorted(self.data_access.load_all_notes().items()):
            if not is_date_key(date_key) or not note.reminder or self.already_shown(date_key):
                continue
            due_at = parse_reminder_time(note.reminder)
            if due_at is None:
                continue
            remaining = due_at - now
            if timedelta(0) < remaining <= self.window:
                reminder = build_reminder(date_key, note, due_at)
                self.notifier(reminder)
                self._shown_until[date_key] = now + self.shown_ttl
                shown.append(reminder)
        return shown
