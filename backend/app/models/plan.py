"""Daily Plan models"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from app.services.retention import plan_has_content


class PlanTask(BaseModel):
    """Task in a daily plan's task list"""
    id: str
    text: str = ""
    completed: bool = False
    urgent: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        return str(value)


class DailyPlan(BaseModel):
    """Hourly plan, task list and notes for one calendar day"""
    hourly_plans: Dict[str, str] = Field(default_factory=dict, alias="hourlyPlans")  # "0".."23" -> text
    tasks: List[PlanTask] = []
    notes: str = ""
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @field_validator("hourly_plans", mode="before")
    @classmethod
    def coerce_hour_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(hour): text for hour, text in value.items()}
        return value

    def has_content(self) -> bool:
        return plan_has_content(self.to_record())

    def find_task(self, task_id: str) -> Optional[PlanTask]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> Optional["DailyPlan"]:
        if record is None:
            return None
        return cls.model_validate(record)
