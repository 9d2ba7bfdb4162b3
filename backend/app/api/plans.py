"""Daily Plan API endpoints"""
from fastapi import APIRouter, HTTPException, Depends, status
from typing import Any, Dict
from app.database import get_document_store
from app.models.responses import ApiResponse
from app.services.document_store import DocumentStore, DocumentWriteError, RecordNotFoundError
from app.utils.monitoring import StructuredLogger

router = APIRouter()


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_all_plans(store: DocumentStore = Depends(get_document_store)):
    """Get all daily plans"""
    return ApiResponse(success=True, data=store.get_all("plans"))


@router.get("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_plan(date_key: str, store: DocumentStore = Depends(get_document_store)):
    """Load the daily plan for a date, or null"""
    return ApiResponse(success=True, data=store.get_record("plans", date_key))


@router.post("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def save_plan(
    date_key: str,
    plan_data: Dict[str, Any],
    store: DocumentStore = Depends(get_document_store),
):
    """Create or replace the daily plan for a date; an empty plan is deleted"""
    try:
        stored = store.save_record("plans", date_key, plan_data)
        StructuredLogger.log_event(
            "plan_saved" if stored is not None else "plan_cleared",
            f"Saved plan {date_key}",
            date_key=date_key,
            metadata={"task_count": len(plan_data.get("tasks") or [])},
        )
        return ApiResponse(success=True, message="Plan saved successfully")
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "save_plan"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving plan",
        )


@router.put("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def update_plan(
    date_key: str,
    update_data: Dict[str, Any],
    store: DocumentStore = Depends(get_document_store),
):
    """Shallow-merge fields onto an existing plan"""
    try:
        merged = store.update_record("plans", date_key, update_data)
        return ApiResponse(success=True, message="Plan updated successfully", data=merged)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "update_plan"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating plan",
        )


@router.delete("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def delete_plan(date_key: str, store: DocumentStore = Depends(get_document_store)):
    """Delete the daily plan for a date"""
    try:
        removed = store.delete_record("plans", date_key)
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "delete_plan"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting plan",
        )
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    return ApiResponse(success=True, message="Plan deleted successfully")
