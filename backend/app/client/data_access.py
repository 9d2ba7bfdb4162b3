"""Fallback data access layer

The single entry point the UI uses to read and write records. Every operation
tries the remote API first and silently falls back to local storage when the
remote is unavailable. Remote writes are not mirrored into local storage:
local storage is a last resort, not a cache.
"""
from typing import Any, Dict, Optional
from app.client.fallback import FallbackStrategy
from app.client.local_store import LocalRecordStore, LocalStorage
from app.client.remote import RemotePlannerAPI
from app.config import Settings, settings as default_settings
from app.models.note import Note
from app.models.plan import DailyPlan
from app.utils.monitoring import StructuredLogger, error_handler


class PlannerDataAccess:
    """Uniform load/save/delete for notes and plans, regardless of backend"""

    def __init__(self, remote: Any, local: LocalRecordStore):
        self.remote = remote
        self.local = local
        self.strategy = FallbackStrategy(primary=remote, secondary=local)

    # ========== Notes ==========

    def load_note(self, date_key: str) -> Optional[Note]:
        """Load the note for a date, or None if there is none"""
        record, _ = self.strategy.run("load_note", date_key)
        return Note.from_record(record)

    def save_note(self, date_key: str, note: Note) -> bool:
        """
        Save a note; storage deletes it instead when it has no content

        Returns:
            True if the remote accepted the write, False if local storage was used
        """
        _, remote_ok = self.strategy.run("save_note", date_key, note.to_record())
        return remote_ok

    def delete_note(self, date_key: str) -> bool:
        """Explicit, user-initiated delete. True if the remote served it"""
        _, remote_ok = self.strategy.run("delete_note", date_key)
        return remote_ok

    def load_all_notes(self) -> Dict[str, Note]:
        records, _ = self.strategy.run("load_all_notes")
        return {date_key: Note.from_record(record) for date_key, record in records.items()}

    @error_handler
    def move_note(self, source_key: str, target_key: str) -> bool:
        """
        Move a note to another day (calendar drag-and-drop)

        Returns:
            False if there is nothing to move
        """
        if source_key == target_key:
            return False
        note = self.load_note(source_key)
        if note is None:
            return False
        self.save_note(target_key, note)
        self.delete_note(source_key)
        StructuredLogger.log_event(
            "note_moved",
            f"Moved note {source_key} -> {target_key}",
            date_key=target_key,
            metadata={"source": source_key},
        )
        return True

    # ========== Plans ==========

    def load_plan(self, date_key: str) -> Optional[DailyPlan]:
        record, _ = self.strategy.run("load_plan", date_key)
        return DailyPlan.from_record(record)

    def save_plan(self, date_key: str, plan: DailyPlan) -> bool:
        _, remote_ok = self.strategy.run("save_plan", date_key, plan.to_record())
        return remote_ok

    def delete_plan(self, date_key: str) -> bool:
        _, remote_ok = self.strategy.run("delete_plan", date_key)
        return remote_ok

    @error_handler
    def update_task_completion(self, date_key: str, task_id: str, completed: bool) -> bool:
        """
        Set one task's completion flag, leaving the rest of the plan untouched

        Returns:
            True if the task was found and the plan saved
        """
        plan = self.load_plan(date_key)
        if plan is None:
            return False
        task = plan.find_task(task_id)
        if task is None:
            return False
        task.completed = completed
        self.save_plan(date_key, plan)
        return True

    # ========== Preferences ==========

    def load_preferences(self) -> Dict[str, Any]:
        preferences, _ = self.strategy.run("load_preferences")
        return preferences

    def save_preferences(self, preferences: Dict[str, Any]) -> bool:
        _, remote_ok = self.strategy.run("save_preferences", preferences)
        return remote_ok


def create_data_access(config: Optional[Settings] = None) -> PlannerDataAccess:
    """Build the data access layer from settings (remote API + file-backed local storage)"""
    config = config or default_settings
    remote = RemotePlannerAPI(base_url=config.API_BASE_URL, timeout=config.REMOTE_TIMEOUT_SECONDS)
    local = LocalRecordStore(LocalStorage(config.LOCAL_STORAGE_FILE))
    return PlannerDataAccess(remote=remote, local=local)
