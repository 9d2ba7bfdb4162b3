"""Tests for the retention (has content) policy"""
import pytest
from app.models.note import Note
from app.models.plan import DailyPlan
from app.services.retention import note_has_content, plan_has_content

EMPTY_NOTE = {
    "text": "",
    "color": "none",
    "emoji": "none",
    "checklist": [],
    "image": None,
    "time": None,
    "reminder": None,
}


def test_empty_note_has_no_content():
    assert note_has_content(EMPTY_NOTE) is False
    assert note_has_content(None) is False
    assert note_has_content({}) is False


@pytest.mark.parametrize("field,value", [
    ("text", "Pray"),
    ("color", "red"),
    ("emoji", "🙏"),
    ("checklist", [{"id": "1", "text": "a", "completed": False}]),
    ("image", "data:image/png;base64,AAAA"),
    ("reminder", "2024-03-05T06:00:00.000Z"),
    ("time", 6),
])
def test_any_single_note_field_counts(field, value):
    assert note_has_content({**EMPTY_NOTE, field: value}) is True


def test_note_pinned_to_midnight_counts():
    assert note_has_content({**EMPTY_NOTE, "time": 0}) is True


def test_plan_content():
    assert plan_has_content({"hourlyPlans": {}, "tasks": [], "notes": ""}) is False
    assert plan_has_content({"hourlyPlans": {"9": "Standup"}}) is True
    assert plan_has_content({"tasks": [{"id": "t1", "text": "x"}]}) is True
    assert plan_has_content({"notes": "quiet day"}) is True


def test_models_delegate_to_policy():
    assert Note().has_content() is False
    assert Note(time=0).has_content() is True
    assert DailyPlan().has_content() is False
    assert DailyPlan(notes="x").has_content() is True
