"""Custom structlog processors for hostfs log events"""

import socket
import sys
import traceback
from typing import Any, Dict, Optional

from structlog.types import EventDict, WrappedLogger

from hostfs.core.config import Settings, settings as default_settings

REDACTED = "***REDACTED***"

SENSITIVE_KEYS = frozenset({
    "password", "passwd", "secret", "token", "credential", "api_key",
    "authorization", "private_key"
})


class ServiceContextProcessor:
    """Processor that adds service-level context to logs"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["service"] = self.settings.app_name
        event_dict["environment"] = self.settings.environment

        try:
            event_dict["hostname"] = socket.gethostname()
        except OSError:
            pass

        return event_dict


add_service_context = ServiceContextProcessor()


def _is_sensitive(key: str) -> bool:
    lower_key = key.lower()
    return any(sensitive in lower_key for sensitive in SENSITIVE_KEYS)


def sanitize_sensitive_data(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential material anywhere in the event"""

    def sanitize_value(value: Any) -> Any:
        if isinstance(value, dict):
            return sanitize_dict(value)
        if isinstance(value, (list, tuple)):
            return type(value)(sanitize_value(item) for item in value)
        return value

    def sanitize_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: REDACTED if _is_sensitive(str(key)) else sanitize_value(value)
            for key, value in d.items()
        }

    return sanitize_dict(event_dict)


def format_exception_info(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Format exception information for better readability"""
    exc_info = event_dict.pop("exc_info", None)
    if exc_info:
        if isinstance(exc_info, BaseException):
            exc_type, exc_value, exc_tb = type(exc_info), exc_info, exc_info.__traceback__
        elif isinstance(exc_info, tuple):
            exc_type, exc_value, exc_tb = exc_info
        else:
            exc_type, exc_value, exc_tb = sys.exc_info()

        if exc_type:
            event_dict["exception"] = {
                "type": exc_type.__name__,
                "message": str(exc_value),
                "traceback": traceback.format_exception(exc_type, exc_value, exc_tb)
            }

    return event_dict


def set_log_severity(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Set proper severity field for log aggregation systems"""
    if "level" in event_dict:
        event_dict["severity"] = str(event_dict["level"]).upper()

    return event_dict
