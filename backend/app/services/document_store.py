"""JSON document store backing the planner API

The whole database is a single JSON document with three namespaces
(``notes``, ``plans``, ``preferences``). Every request reads the full
document, and every write rewrites it in full. There is no locking: two
writers racing on the file can lose one update (last write wins).
"""
import json
from copy import deepcopy
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union
from app.services.retention import HAS_CONTENT
from app.utils.monitoring import StructuredLogger, track_storage

NAMESPACES = ("notes", "plans", "preferences")
RECORD_NAMESPACES = ("notes", "plans")


class DocumentStoreError(Exception):
    """Base exception for document store failures"""
    pass


class DocumentWriteError(DocumentStoreError):
    """Raised when the document could not be written to disk"""
    pass


class RecordNotFoundError(DocumentStoreError):
    """Raised when updating a record that does not exist"""
    pass


def empty_document() -> Dict[str, Dict[str, Any]]:
    return {namespace: {} for namespace in NAMESPACES}


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-05T06:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DocumentStore:
    """Read-modify-write access to the planner's JSON document"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the document with empty namespaces if it does not exist yet"""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.write(empty_document())
        StructuredLogger.log_event(
            "database_created",
            f"Database file created: {self.path}",
            metadata={"path": str(self.path)},
        )

    def read(self) -> Dict[str, Dict[str, Any]]:
        """
        Load the full document

        An unreadable or corrupt file is logged and read as an empty document.
        Missing namespaces are filled in.
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            StructuredLogger.log_error(e, context={"function": "read", "path": str(self.path)})
            return empty_document()

        if not isinstance(data, dict):
            StructuredLogger.log_event(
                "database_malformed",
                "Database document is not a JSON object, reading as empty",
                metadata={"path": str(self.path)},
                level="WARNING",
            )
            return empty_document()

        for namespace in NAMESPACES:
            if not isinstance(data.get(namespace), dict):
                data[namespace] = {}
        return data

    @track_storage
    def write(self, data: Dict[str, Dict[str, Any]]) -> None:
        """Rewrite the full document"""
        try:
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise DocumentWriteError(f"Failed to write database {self.path}: {e}") from e

    # ========== Records ==========

    def get_record(self, namespace: str, key: str) -> Optional[Dict[str, Any]]:
        return self.read()[namespace].get(key)

    def get_all(self, namespace: str) -> Dict[str, Any]:
        return self.read()[namespace]

    def save_record(self, namespace: str, key: str, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Upsert the record, or delete it when it has no content

        ``createdAt`` is kept when the caller provides it; ``updatedAt`` is
        always stamped.

        Returns:
            The stored record, or None if the key was deleted
        """
        has_content = HAS_CONTENT[namespace]
        data = self.read()
        if has_content(record):
            stored = deepcopy(record)
            now = utc_timestamp()
            if not stored.get("createdAt"):
                stored["createdAt"] = now
            stored["updatedAt"] = now
            data[namespace][key] = stored
        else:
            stored = None
            data[namespace].pop(key, None)
        self.write(data)
        return stored

    def update_record(self, namespace: str, key: str, partial: Dict[str, Any]) -> Dict[str, Any]:
        """
        Shallow-merge ``partial`` onto an existing record

        Unlike ``save_record`` this does not consult the retention policy.

        Raises:
            RecordNotFoundError: If no record exists under ``key``
        """
        data = self.read()
        existing = data[namespace].get(key)
        if existing is None:
            raise RecordNotFoundError(f"{namespace} record not found: {key}")
        merged = {**existing, **partial, "updatedAt": utc_timestamp()}
        data[namespace][key] = merged
        self.write(data)
        return merged

    def delete_record(self, namespace: str, key: str) -> bool:
        """
        Remove a record

        Returns:
            True if a record was removed, False if none existed
        """
        data = self.read()
        if key not in data[namespace]:
            return False
        del data[namespace][key]
        self.write(data)
        return True

    # ========== Preferences ==========

    def get_preferences(self) -> Dict[str, Any]:
        return self.read()["preferences"]

    def merge_preferences(self, partial: Dict[str, Any]) -> Dict[str, Any]:
        data = self.read()
        data["preferences"] = {**data["preferences"], **partial}
        self.write(data)
        return data["preferences"]
