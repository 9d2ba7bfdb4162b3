"""Background scheduler for the planner's periodic client jobs"""
from typing import Callable, Optional
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from app.config import settings
from app.client.reminders import ReminderChecker
from app.client.sidebar import HourlySidebar, build_hourly_sidebar
from app.utils.monitoring import StructuredLogger

REMINDER_JOB_ID = "check_reminders"
SIDEBAR_JOB_ID = "refresh_hourly_sidebar"


class PlannerScheduler:
    """
    Owns the periodic reminder check and hourly sidebar refresh

    Jobs can also be run directly through ``run_reminder_check`` and
    ``run_sidebar_refresh``, which is how tests drive them deterministically.
    """

    def __init__(
        self,
        data_access,
        reminder_checker: Optional[ReminderChecker] = None,
        on_sidebar: Optional[Callable[[HourlySidebar], None]] = None,
        scheduler: Optional[BackgroundScheduler] = None,
    ):
        self.data_access = data_access
        self.reminder_checker = reminder_checker or ReminderChecker(data_access)
        self.on_sidebar = on_sidebar
        self.scheduler = scheduler or BackgroundScheduler()

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def run_reminder_check(self) -> None:
        """Wrapper for the reminder check with error handling"""
        try:
            shown = self.reminder_checker.check()
            if shown:
                StructuredLogger.log_event(
                    "reminders_shown",
                    f"Showed {len(shown)} reminder(s)",
                    metadata={"date_keys": [reminder.date_key for reminder in shown]},
                )
        except Exception as e:
            StructuredLogger.log_error(e, context={"function": "run_reminder_check"})

    def run_sidebar_refresh(self) -> Optional[HourlySidebar]:
        """Rebuild the hourly sidebar and hand it to the UI callback"""
        try:
            sidebar = build_hourly_sidebar(self.data_access)
        except Exception as e:
            StructuredLogger.log_error(e, context={"function": "run_sidebar_refresh"})
            return None
        if self.on_sidebar is not None:
            self.on_sidebar(sidebar)
        return sidebar

    def start(self) -> None:
        """Start the background scheduler"""
        if self.scheduler.running:
            return

        self.scheduler.add_job(
            self.run_reminder_check,
            trigger=IntervalTrigger(seconds=settings.REMINDER_CHECK_INTERVAL_SECONDS),
            id=REMINDER_JOB_ID,
            name="Check note reminders",
            replace_existing=True,
        )

        self.scheduler.add_job(
            self.run_sidebar_refresh,
            trigger=IntervalTrigger(seconds=settings.SIDEBAR_REFRESH_INTERVAL_SECONDS),
            id=SIDEBAR_JOB_ID,
            name="Refresh the hourly sidebar",
            replace_existing=True,
        )

        self.scheduler.start()

        reminder_job = self.scheduler.get_job(REMINDER_JOB_ID)
        sidebar_job = self.scheduler.get_job(SIDEBAR_JOB_ID)

        StructuredLogger.log_event(
            "scheduler_initialized",
            "Background scheduler started",
            metadata={
                "next_reminder_check": str(reminder_job.next_run_time) if reminder_job else None,
                "next_sidebar_refresh": str(sidebar_job.next_run_time) if sidebar_job else None,
            },
        )

    def pause(self) -> None:
        if self.scheduler.running:
            self.scheduler.pause()

    def resume(self) -> None:
        if self.scheduler.running:
            self.scheduler.resume()

    def shutdown(self) -> None:
        """Shutdown the background scheduler"""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            StructuredLogger.log_event(
                "scheduler_shutdown",
                "Background scheduler stopped",
            )
