"""Data models for the daily planner"""
from app.models.note import Note, ChecklistItem
from app.models.plan import DailyPlan, PlanTask
from app.models.responses import ApiResponse

__all__ = [
    "Note",
    "ChecklistItem",
    "DailyPlan",
    "PlanTask",
    "ApiResponse",
]
