"""Document store initialization"""
from pathlib import Path
from typing import Optional
from fastapi import Request
from app.config import settings
from app.services.document_store import DocumentStore

# Lazy initialization - the store is created on first access
_document_store: Optional[DocumentStore] = None


def _validate_database_config():
    """Validate that DATABASE_FILE points at a usable JSON file path"""
    path = Path(settings.DATABASE_FILE)
    if not settings.DATABASE_FILE or path.suffix != ".json":
        raise ValueError(
            "Database configuration is invalid.\n"
            f"  DATABASE_FILE={settings.DATABASE_FILE!r}\n\n"
            "Set DATABASE_FILE in your .env file to a path ending in .json "
            "(e.g. data/database.json)."
        )
    if path.exists() and path.is_dir():
        raise ValueError(f"DATABASE_FILE points at a directory: {path}")


def get_store() -> DocumentStore:
    """Get or create the process-wide document store"""
    global _document_store
    if _document_store is None:
        _validate_database_config()
        _document_store = DocumentStore(settings.DATABASE_FILE)
    return _document_store


def get_document_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the application's document store"""
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        store = get_store()
    return store
