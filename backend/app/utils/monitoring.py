"""Monitoring, logging, and error tracking utilities"""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from functools import wraps
import time

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)

logger = logging.getLogger("dayplanner")


class StructuredLogger:
    """Structured JSON logging"""

    @staticmethod
    def log_event(
        event_type: str,
        message: str,
        date_key: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        level: str = "INFO"
    ):
        """Log structured event"""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
            "message": message,
            "level": level,
        }

        if date_key:
            log_data["date_key"] = date_key

        if metadata:
            log_data["metadata"] = metadata

        log_message = json.dumps(log_data, default=str, ensure_ascii=False)

        if level == "ERROR":
            logger.error(log_message)
        elif level == "WARNING":
            logger.warning(log_message)
        else:
            logger.info(log_message)

    @staticmethod
    def log_error(
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        date_key: Optional[str] = None
    ):
        """Log error with full context"""
        StructuredLogger.log_event(
            event_type="error",
            message=str(error),
            date_key=date_key,
            metadata={
                "error_type": type(error).__name__,
                "traceback": traceback.format_exc(),
                "context": context or {},
            },
            level="ERROR"
        )


class StorageMetrics:
    """Track document store writes"""

    def __init__(self):
        self.metrics: Dict[str, Any] = {
            "total_writes": 0,
            "successful_writes": 0,
            "failed_writes": 0,
            "processing_times": [],
            "last_write": None,
        }

    def record_write(self, success: bool, processing_time: float):
        """Record a write attempt"""
        self.metrics["total_writes"] += 1

        if success:
            self.metrics["successful_writes"] += 1
        else:
            self.metrics["failed_writes"] += 1

        self.metrics["processing_times"].append(processing_time)
        self.metrics["last_write"] = datetime.now(timezone.utc).isoformat()

        # Keep only last 100 processing times
        if len(self.metrics["processing_times"]) > 100:
            self.metrics["processing_times"] = self.metrics["processing_times"][-100:]

    def get_success_rate(self) -> float:
        """Calculate success rate"""
        total = self.metrics["successful_writes"] + self.metrics["failed_writes"]
        if total == 0:
            return 0.0
        return (self.metrics["successful_writes"] / total) * 100

    def get_avg_processing_time(self) -> float:
        """Calculate average processing time"""
        if not self.metrics["processing_times"]:
            return 0.0
        return sum(self.metrics["processing_times"]) / len(self.metrics["processing_times"])

    def get_metrics(self) -> Dict[str, Any]:
        """Get all metrics"""
        return {
            "total_writes": self.metrics["total_writes"],
            "successful_writes": self.metrics["successful_writes"],
            "failed_writes": self.metrics["failed_writes"],
            "last_write": self.metrics["last_write"],
            "success_rate": self.get_success_rate(),
            "avg_processing_time": self.get_avg_processing_time(),
        }


# Global metrics instance
storage_metrics = StorageMetrics()


def track_storage(func):
    """Decorator to track document write performance"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        success = False

        try:
            result = func(*args, **kwargs)
            success = True
            return result
        except Exception as e:
            StructuredLogger.log_error(e, context={"function": func.__name__})
            raise
        finally:
            processing_time = time.time() - start_time
            storage_metrics.record_write(success, processing_time)

    return wrapper


def error_handler(func):
    """Decorator that logs an exception with the function name and re-raises it"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            StructuredLogger.log_error(e, context={"function": func.__name__})
            raise
    return wrapper
