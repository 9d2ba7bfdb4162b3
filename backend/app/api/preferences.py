"""Preferences API endpoints (dark mode, theme, ...)"""
from fastapi import APIRouter, HTTPException, Depends, status
from typing import Any, Dict
from app.database import get_document_store
from app.models.responses import ApiResponse
from app.services.document_store import DocumentStore, DocumentWriteError
from app.utils.monitoring import StructuredLogger

router = APIRouter()


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_preferences(store: DocumentStore = Depends(get_document_store)):
    return ApiResponse(success=True, data=store.get_preferences())


@router.post("", response_model=ApiResponse, response_model_exclude_unset=True)
async def save_preferences(
    preferences: Dict[str, Any],
    store: DocumentStore = Depends(get_document_store),
):
    """Shallow-merge the given preferences onto the stored ones"""
    try:
        store.merge_preferences(preferences)
        return ApiResponse(success=True, message="Preferences saved successfully")
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "save_preferences"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving preferences",
        )
