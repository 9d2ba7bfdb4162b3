"""Note models"""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from app.services.retention import NO_VALUE, note_has_content


class ChecklistItem(BaseModel):
    """Single checklist entry on a note"""
    id: str
    text: str = ""
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        # older records used numeric timestamps as ids
        return str(value)


class Note(BaseModel):
    """Free-form note pinned to one calendar day"""
    text: str = ""
    color: str = NO_VALUE  # none, red, blue, green, ...
    emoji: str = NO_VALUE
    checklist: List[ChecklistItem] = []
    image: Optional[str] = None  # data URI
    time: Optional[int] = Field(None, ge=0, le=23)  # hour the note is pinned to
    reminder: Optional[str] = None  # ISO-8601
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True

    def has_content(self) -> bool:
        return note_has_content(self.to_record())

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the JSON record shape used on the wire and in storage"""
        return self.model_dump(by_alias=True, exclude_none=False)

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> Optional["Note"]:
        if record is None:
            return None
        return cls.model_validate(record)
