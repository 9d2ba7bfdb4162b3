"""Notes API endpoints"""
from fastapi import APIRouter, HTTPException, Depends, status
from typing import Any, Dict
from app.database import get_document_store
from app.models.responses import ApiResponse
from app.services.document_store import DocumentStore, DocumentWriteError, RecordNotFoundError
from app.utils.monitoring import StructuredLogger

router = APIRouter()


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_all_notes(store: DocumentStore = Depends(get_document_store)):
    """Get all notes (timeline view and search)"""
    return ApiResponse(success=True, data=store.get_all("notes"))


@router.get("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_note(date_key: str, store: DocumentStore = Depends(get_document_store)):
    """Load the note for a date, or null"""
    return ApiResponse(success=True, data=store.get_record("notes", date_key))


@router.post("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def save_note(
    date_key: str,
    note_data: Dict[str, Any],
    store: DocumentStore = Depends(get_document_store),
):
    """Create or replace the note for a date; a note without content is deleted"""
    try:
        stored = store.save_record("notes", date_key, note_data)
        StructuredLogger.log_event(
            "note_saved" if stored is not None else "note_cleared",
            f"Saved note {date_key}",
            date_key=date_key,
        )
        return ApiResponse(success=True, message="Note saved successfully")
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "save_note"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error saving note",
        )


@router.put("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def update_note(
    date_key: str,
    note_data: Dict[str, Any],
    store: DocumentStore = Depends(get_document_store),
):
    """Shallow-merge fields onto an existing note"""
    try:
        merged = store.update_record("notes", date_key, note_data)
        return ApiResponse(success=True, message="Note updated successfully", data=merged)
    except RecordNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "update_note"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error updating note",
        )


@router.delete("/{date_key}", response_model=ApiResponse, response_model_exclude_unset=True)
async def delete_note(date_key: str, store: DocumentStore = Depends(get_document_store)):
    """Delete the note for a date"""
    try:
        removed = store.delete_record("notes", date_key)
    except DocumentWriteError as e:
        StructuredLogger.log_error(e, context={"function": "delete_note"}, date_key=date_key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting note",
        )
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return ApiResponse(success=True, message="Note deleted successfully")
