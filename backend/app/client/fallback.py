"""Two-stage primary/secondary backend strategy"""
from typing import Any, Callable, Tuple
from app.client.remote import RemoteUnavailableError
from app.utils.monitoring import StructuredLogger


def is_remote_unavailable(error: Exception) -> bool:
    """Error classification: only remote-unavailable failures trigger the fallback"""
    return isinstance(error, RemoteUnavailableError)


class FallbackStrategy:
    """
    Run a backend operation against the primary, falling back to the secondary

    Both backends expose the same method names (``load_note``, ``save_plan``,
    ...). Errors accepted by ``should_fall_back`` are logged and swallowed;
    anything else propagates to the caller.
    """

    def __init__(
        self,
        primary: Any,
        secondary: Any,
        should_fall_back: Callable[[Exception], bool] = is_remote_unavailable,
    ):
        self.primary = primary
        self.secondary = secondary
        self.should_fall_back = should_fall_back
        self.fallback_count = 0

    def run(self, operation: str, *args: Any) -> Tuple[Any, bool]:
        """
        Execute ``operation`` with ``args``

        Returns:
            (result, served_by_primary)
        """
        try:
            return getattr(self.primary, operation)(*args), True
        except Exception as e:
            if not self.should_fall_back(e):
                raise
            self.fallback_count += 1
            StructuredLogger.log_event(
                "storage_fallback",
                f"Falling back to local storage for {operation}: {e}",
                date_key=args[0] if args and isinstance(args[0], str) else None,
                metadata={"operation": operation, "error_type": type(e).__name__},
                level="WARNING",
            )
        return getattr(self.secondary, operation)(*args), False
