"""Tests for the plan mode merger"""
import pytest
from app.client.plan_modes import PlanEditor, PlanMode, PlanModeMerger
from app.models.plan import DailyPlan, PlanTask

KEY = "planner-2024-03-05"


@pytest.fixture
def merger(data_access):
    return PlanModeMerger(data_access)


def test_open_renders_stored_plan(merger, data_access):
    data_access.save_plan(KEY, DailyPlan(hourly_plans={"9": "Standup"}, notes="quiet"))
    editor = merger.open(KEY, PlanMode.NOTES)
    assert editor.mode == PlanMode.NOTES
    assert editor.hour_inputs[9] == "Standup"
    assert editor.notes_input == "quiet"
    assert editor.task_inputs == []


def test_switch_only_overwrites_captured_fields(merger, data_access):
    data_access.save_plan(KEY, DailyPlan(notes="keep me", hourly_plans={"7": "Run"}))
    editor = merger.open(KEY, PlanMode.TASKS)
    editor.add_task("Write report", urgent=True)

    merged = merger.switch_mode(editor, PlanMode.PLAN)

    assert merged.notes == "keep me"
    assert merged.hourly_plans == {"7": "Run"}
    assert [task.text for task in merged.tasks] == ["Write report"]
    assert merged.tasks[0].urgent is True


def test_hourly_grid_is_captured_in_every_mode(merger, data_access):
    editor = merger.open(KEY, PlanMode.NOTES)
    editor.set_hour(14, "  Dentist  ")
    editor.set_notes("bring card")
    merger.switch_mode(editor, PlanMode.TASKS)

    stored = data_access.load_plan(KEY)
    assert stored.hourly_plans == {"14": "Dentist"}
    assert stored.notes == "bring card"
    assert editor.hour_inputs[14] == "Dentist"


def test_blank_inputs_are_dropped(merger, data_access):
    editor = merger.open(KEY, PlanMode.TASKS)
    editor.add_task("   ")
    editor.set_hour(3, "   ")
    merger.switch_mode(editor, PlanMode.PLAN)
    assert data_access.load_plan(KEY) is None


def test_clearing_everything_deletes_the_plan(merger, data_access):
    data_access.save_plan(KEY, DailyPlan(notes="temporary"))
    editor = merger.open(KEY, PlanMode.NOTES)
    editor.set_notes("")
    merger.commit(editor)
    assert data_access.load_plan(KEY) is None


def test_edits_made_elsewhere_are_not_clobbered(merger, data_access):
    editor = merger.open(KEY, PlanMode.NOTES)
    # another view (the sidebar) adds a task while the modal shows notes
    data_access.save_plan(KEY, DailyPlan(tasks=[PlanTask(id="t1", text="sidebar task")]))
    editor.set_notes("from modal")
    merged = merger.switch_mode(editor, PlanMode.TASKS)
    assert [task.id for task in merged.tasks] == ["t1"]
    assert merged.notes == "from modal"
    assert [task.id for task in editor.task_inputs] == ["t1"]


def test_editor_task_helpers():
    editor = PlanEditor(date_key=KEY, mode=PlanMode.TASKS)
    task = editor.add_task("a")
    assert task.id.startswith("task-")
    assert editor.find_task(task.id) is task
    editor.remove_task(task.id)
    assert editor.task_inputs == []
    with pytest.raises(ValueError):
        editor.set_hour(24, "late")
