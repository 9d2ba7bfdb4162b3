"""Plan mode merger

The daily plan modal has three mutually exclusive sub-views sharing one Plan
record: the hourly grid (``plan``), a single notes field (``notes``) and a task
list (``tasks``). The hourly grid stays rendered in every mode, so each switch
captures it along with whichever of notes/tasks is active, merges only those
fields onto the latest stored plan, saves, and renders the target view from
the merged record.
"""
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4
from app.models.plan import DailyPlan, PlanTask
from app.utils.monitoring import StructuredLogger

HOURS = range(24)


class PlanMode(str, Enum):
    """Sub-views of the daily plan modal"""
    PLAN = "plan"
    NOTES = "notes"
    TASKS = "tasks"


def _blank_hours() -> Dict[int, str]:
    return {hour: "" for hour in HOURS}


@dataclass
class PlanEditor:
    """Editable fields currently rendered in the daily plan modal"""
    date_key: str
    mode: PlanMode = PlanMode.PLAN
    hour_inputs: Dict[int, str] = field(default_factory=_blank_hours)
    notes_input: str = ""
    task_inputs: List[PlanTask] = field(default_factory=list)

    def set_hour(self, hour: int, text: str) -> None:
        if hour not in HOURS:
            raise ValueError(f"hour must be 0-23, got {hour}")
        self.hour_inputs[hour] = text

    def set_notes(self, text: str) -> None:
        self.notes_input = text

    def add_task(self, text: str = "", completed: bool = False, urgent: bool = False,
                 task_id: Optional[str] = None) -> PlanTask:
        task = PlanTask(
            id=task_id or f"task-{uuid4().hex[:12]}",
            text=text,
            completed=completed,
            urgent=urgent,
        )
        self.task_inputs.append(task)
        return task

    def find_task(self, task_id: str) -> Optional[PlanTask]:
        for task in self.task_inputs:
            if task.id == task_id:
                return task
        return None

    def remove_task(self, task_id: str) -> None:
        self.task_inputs = [task for task in self.task_inputs if task.id != task_id]

    def capture_hourly_plans(self) -> Dict[str, str]:
        return {
            str(hour): text.strip()
            for hour, text in sorted(self.hour_inputs.items())
            if text and text.strip()
        }

    def capture_tasks(self) -> List[PlanTask]:
        return [
            task.model_copy(update={"text": task.text.strip()})
            for task in self.task_inputs
            if task.text.strip()
        ]


class PlanModeMerger:
    """Field-level merge of plan sub-view edits onto the stored plan"""

    def __init__(self, data_access):
        self.data_access = data_access

    def open(self, date_key: str, mode: PlanMode = PlanMode.PLAN) -> PlanEditor:
        """Create an editor for ``date_key`` showing ``mode``"""
        editor = PlanEditor(date_key=date_key)
        plan = self.data_access.load_plan(date_key) or DailyPlan()
        self.render(editor, PlanMode(mode), plan)
        return editor

    def merge(self, editor: PlanEditor, plan: DailyPlan) -> DailyPlan:
        """Overwrite only the fields rendered in ``editor`` onto ``plan``"""
        merged = plan.model_copy(deep=True)
        merged.hourly_plans = editor.capture_hourly_plans()
        if editor.mode == PlanMode.NOTES:
            merged.notes = editor.notes_input.strip()
        elif editor.mode == PlanMode.TASKS:
            merged.tasks = editor.capture_tasks()
        return merged

    def commit(self, editor: PlanEditor) -> DailyPlan:
        """Capture, merge onto the latest stored plan, and save"""
        latest = self.data_access.load_plan(editor.date_key) or DailyPlan()
        merged = self.merge(editor, latest)
        # storage decides between persisting and deleting an empty plan
        self.data_access.save_plan(editor.date_key, merged)
        return merged

    def switch_mode(self, editor: PlanEditor, target: PlanMode) -> DailyPlan:
        """
        Switch the editor to ``target`` without losing edits in the current view

        Returns:
            The merged plan the target view was rendered from
        """
        target = PlanMode(target)
        previous = editor.mode
        merged = self.commit(editor)
        self.render(editor, target, merged)
        StructuredLogger.log_event(
            "plan_mode_switched",
            f"Plan mode {previous.value} -> {target.value}",
            date_key=editor.date_key,
            metadata={
                "hours": len(merged.hourly_plans),
                "tasks": len(merged.tasks),
                "has_notes": bool(merged.notes),
            },
        )
        return merged

    @staticmethod
    def render(editor: PlanEditor, mode: PlanMode, plan: DailyPlan) -> None:
        """Populate the editor's fields for ``mode`` from ``plan``"""
        editor.mode = mode
        editor.hour_inputs = {hour: plan.hourly_plans.get(str(hour), "") for hour in HOURS}
        editor.notes_input = plan.notes if mode == PlanMode.NOTES else ""
        editor.task_inputs = deepcopy(plan.tasks) if mode == PlanMode.TASKS else []
