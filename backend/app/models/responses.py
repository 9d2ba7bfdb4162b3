"""API response envelope"""
from pydantic import BaseModel
from typing import Any, Optional


class ApiResponse(BaseModel):
    """Every endpoint answers ``{success, data?, message?}``

    Routes serialize with ``response_model_exclude_unset`` so that an explicit
    ``data=None`` (record not found) is kept while unset fields are dropped.
    """
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
