"""
API error codes and the JSON error envelope.
"""
from typing import Any, Dict, Optional

from listing_engine.utils import now_iso


class ErrorCodes:
    UNAUTHORIZED = "AUTH_001"
    VALIDATION_ERROR = "DATA_001"
    RESOURCE_NOT_FOUND = "DATA_002"
    INTERNAL_SERVER_ERROR = "SERVER_001"
    SERVICE_UNAVAILABLE = "SERVER_002"


class ApiError(Exception):
    """Error raised by route handlers and rendered as an error envelope."""

    def __init__(self, message: str, code: str = ErrorCodes.INTERNAL_SERVER_ERROR,
                 status_code: int = 500, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


def error_body(code: str, message: str, path: str,
               details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "timestamp": now_iso(),
        "path": path,
    }
