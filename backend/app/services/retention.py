"""Retention policy: decides whether a record is worth persisting

Both the server document store and the client local store run every save
through these predicates. A record without content is deleted instead of
written, so callers always save and never delete "because it became empty".
"""
from typing import Any, Dict, Optional

NO_VALUE = "none"


def note_has_content(note: Optional[Dict[str, Any]]) -> bool:
    """True if any note field carries meaningful content"""
    if not note:
        return False
    return bool(
        note.get("text")
        or note.get("color", NO_VALUE) not in (NO_VALUE, None, "")
        or note.get("emoji", NO_VALUE) not in (NO_VALUE, None, "")
        or note.get("checklist")
        or note.get("image")
        or note.get("reminder")
        # hour 0 is a valid pin
        or note.get("time") is not None
    )


def plan_has_content(plan: Optional[Dict[str, Any]]) -> bool:
    """True if the plan has hourly entries, tasks, or notes text"""
    if not plan:
        return False
    return bool(
        plan.get("hourlyPlans")
        or plan.get("tasks")
        or plan.get("notes")
    )


HAS_CONTENT = {
    "notes": note_has_content,
    "plans": plan_has_content,
}
