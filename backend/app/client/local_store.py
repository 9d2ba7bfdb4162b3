"""Local fallback storage

``LocalStorage`` mirrors a browser's localStorage: a flat mapping of string
keys to string values, optionally persisted to a JSON file. ``LocalRecordStore``
keeps notes under their date key and plans under ``plan-<date key>`` on top of
it, applying the same retention policy as the server.
"""
import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union
from pydantic import ValidationError
from app.models.note import Note
from app.models.plan import DailyPlan
from app.services.retention import NO_VALUE, note_has_content, plan_has_content
from app.utils.datekey import is_date_key
from app.utils.monitoring import StructuredLogger

PLAN_KEY_PREFIX = "plan-"
PREFERENCES_KEY = "preferences"


class LocalStorage:
    """String key/value store, in memory or backed by a JSON file"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self._items: Dict[str, str] = {}
        if self.path is not None and self.path.exists():
            self._items = self._load()

    def _load(self) -> Dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            StructuredLogger.log_error(e, context={"function": "LocalStorage._load", "path": str(self.path)})
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()

    def keys(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


def legacy_note(text: str) -> Dict[str, Any]:
    """Default-shaped note rebuilt from a pre-JSON plain text value"""
    return {
        "text": text,
        "color": NO_VALUE,
        "emoji": NO_VALUE,
        "checklist": [],
        "image": None,
        "time": None,
        "reminder": None,
    }


def plan_key(date_key: str) -> str:
    return f"{PLAN_KEY_PREFIX}{date_key}"


class LocalRecordStore:
    """Record backend over ``LocalStorage`` (the fallback target)"""

    def __init__(self, storage: Optional[LocalStorage] = None):
        self.storage = storage if storage is not None else LocalStorage()

    # ========== Notes ==========

    def load_note(self, date_key: str) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(date_key)
        if not raw:
            return None
        try:
            note = json.loads(raw)
        except ValueError:
            note = None
        if not isinstance(note, dict):
            StructuredLogger.log_event(
                "legacy_note_recovered",
                "Rebuilt note from non-JSON local value",
                date_key=date_key,
                level="WARNING",
            )
            return legacy_note(raw)
        note.setdefault("time", None)
        try:
            Note.model_validate(note)
        except ValidationError as e:
            text = note.get("text")
            StructuredLogger.log_event(
                "legacy_note_recovered",
                "Rebuilt note from corrupt local record",
                date_key=date_key,
                metadata={"errors": e.error_count()},
                level="WARNING",
            )
            return legacy_note(text if isinstance(text, str) else "")
        return note

    def save_note(self, date_key: str, note: Dict[str, Any]) -> None:
        if note_has_content(note):
            self.storage.set_item(date_key, json.dumps(note, ensure_ascii=False))
        else:
            self.storage.remove_item(date_key)

    def delete_note(self, date_key: str) -> None:
        self.storage.remove_item(date_key)

    def load_all_notes(self) -> Dict[str, Dict[str, Any]]:
        notes = {}
        for key in self.storage.keys():
            if is_date_key(key):
                note = self.load_note(key)
                if note is not None:
                    notes[key] = note
        return notes

    # ========== Plans ==========

    def load_plan(self, date_key: str) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(plan_key(date_key))
        if not raw:
            return None
        try:
            plan = json.loads(raw)
        except ValueError:
            return None
        if not isinstance(plan, dict):
            return None
        try:
            DailyPlan.model_validate(plan)
        except ValidationError as e:
            StructuredLogger.log_event(
                "corrupt_plan_discarded",
                "Ignoring corrupt local plan",
                date_key=date_key,
                metadata={"errors": e.error_count()},
                level="WARNING",
            )
            return None
        return plan

    def save_plan(self, date_key: str, plan: Dict[str, Any]) -> None:
        if plan_has_content(plan):
            self.storage.set_item(plan_key(date_key), json.dumps(plan, ensure_ascii=False))
        else:
            self.storage.remove_item(plan_key(date_key))

    def delete_plan(self, date_key: str) -> None:
        self.storage.remove_item(plan_key(date_key))

    # ========== Preferences ==========

    def load_preferences(self) -> Dict[str, Any]:
        raw = self.storage.get_item(PREFERENCES_KEY)
        if not raw:
            return {}
        try:
            preferences = json.loads(raw)
        except ValueError:
            return {}
        return preferences if isinstance(preferences, dict) else {}

    def save_preferences(self, preferences: Dict[str, Any]) -> None:
        merged = {**self.load_preferences(), **preferences}
        self.storage.set_item(PREFERENCES_KEY, json.dumps(merged, ensure_ascii=False))
