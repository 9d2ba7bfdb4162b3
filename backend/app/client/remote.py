"""HTTP client for the planner API (the primary, remote record backend)"""
from typing import Any, Dict, Optional, Type
import requests
from pydantic import BaseModel, ValidationError
from app.config import settings
from app.models.note import Note
from app.models.plan import DailyPlan
from app.utils.monitoring import StructuredLogger

# passing timeout=None explicitly disables the transport timeout
DEFAULT_TIMEOUT = object()


class RemoteUnavailableError(Exception):
    """The remote store could not serve the request

    Covers transport failures, non-2xx statuses and malformed payloads alike;
    callers are not expected to tell them apart.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _check_record(model: Type[BaseModel], record: Any, endpoint: str) -> Dict[str, Any]:
    """Reject a ``data`` payload that is not a valid ``model`` record"""
    try:
        model.model_validate(record)
    except ValidationError as e:
        raise RemoteUnavailableError(f"{endpoint} returned a malformed record") from e
    return record


class RemotePlannerAPI:
    """Remote record backend talking to the planner HTTP API"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Any = DEFAULT_TIMEOUT,
    ):
        self.base_url = (base_url if base_url is not None else settings.API_BASE_URL).rstrip("/")
        # anything with a requests-compatible ``request`` method works here
        self.session = session if session is not None else requests.Session()
        self.timeout = settings.REMOTE_TIMEOUT_SECONDS if timeout is DEFAULT_TIMEOUT else timeout

    def request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make an API request

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API path, e.g. ``/api/notes/planner-2024-03-05``
            data: JSON body for POST/PUT

        Returns:
            The decoded ``{success, data?, message?}`` envelope

        Raises:
            RemoteUnavailableError: On any transport, status or payload failure
        """
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if data is not None and method in ("POST", "PUT"):
            kwargs["json"] = data

        try:
            response = self.session.request(method, f"{self.base_url}{endpoint}", **kwargs)
        except requests.exceptions.RequestException as e:
            raise RemoteUnavailableError(f"{method} {endpoint} failed: {e}") from e

        try:
            result = response.json()
        except ValueError as e:
            raise RemoteUnavailableError(
                f"{method} {endpoint} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not 200 <= response.status_code < 300:
            message = result.get("message") if isinstance(result, dict) else None
            StructuredLogger.log_event(
                "api_error",
                f"API Error: {message or 'API request failed'}",
                metadata={"method": method, "endpoint": endpoint, "status_code": response.status_code},
                level="WARNING",
            )
            raise RemoteUnavailableError(message or "API request failed", status_code=response.status_code)

        if not isinstance(result, dict) or result.get("success") is not True:
            raise RemoteUnavailableError(
                f"{method} {endpoint} returned a malformed payload",
                status_code=response.status_code,
            )
        return result

    # ========== Record backend interface ==========

    def load_note(self, date_key: str) -> Optional[Dict[str, Any]]:
        endpoint = f"/api/notes/{date_key}"
        record = self.request("GET", endpoint).get("data")
        return None if record is None else _check_record(Note, record, endpoint)

    def save_note(self, date_key: str, note: Dict[str, Any]) -> None:
        self.request("POST", f"/api/notes/{date_key}", note)

    def delete_note(self, date_key: str) -> None:
        self.request("DELETE", f"/api/notes/{date_key}")

    def load_all_notes(self) -> Dict[str, Dict[str, Any]]:
        records = self.request("GET", "/api/notes").get("data") or {}
        if not isinstance(records, dict):
            raise RemoteUnavailableError("/api/notes returned a malformed note map")
        return {
            date_key: _check_record(Note, record, "/api/notes")
            for date_key, record in records.items()
        }

    def load_plan(self, date_key: str) -> Optional[Dict[str, Any]]:
        endpoint = f"/api/plans/{date_key}"
        record = self.request("GET", endpoint).get("data")
        return None if record is None else _check_record(DailyPlan, record, endpoint)

    def save_plan(self, date_key: str, plan: Dict[str, Any]) -> None:
        self.request("POST", f"/api/plans/{date_key}", plan)

    def delete_plan(self, date_key: str) -> None:
        self.request("DELETE", f"/api/plans/{date_key}")

    def load_preferences(self) -> Dict[str, Any]:
        preferences = self.request("GET", "/api/preferences").get("data") or {}
        if not isinstance(preferences, dict):
            raise RemoteUnavailableError("/api/preferences returned malformed preferences")
        return preferences

    def save_preferences(self, preferences: Dict[str, Any]) -> None:
        self.request("POST", "/api/preferences", preferences)
