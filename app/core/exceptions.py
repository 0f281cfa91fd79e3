"""
Glovebox API - Custom Exceptions

Every error aborts the scan and reaches the caller as a single
``{"error": ...}`` body with status 400.
"""

from typing import Optional, Dict, Any, List
from fastapi import HTTPException, status


class GloveboxException(HTTPException):
    """Base exception for Glovebox API."""

    def __init__(
        self,
        detail: str,
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code
        self.extra = extra or {}

    def __str__(self) -> str:
        return str(self.detail)


class ConfigurationError(GloveboxException):
    """Required connection settings are missing."""

    def __init__(self, missing: List[str]):
        super().__init__(
            detail=f"Missing environment variables: {', '.join(missing)}",
            error_code="CONFIGURATION_ERROR",
            extra={"missing": missing}
        )


class DataAccessError(GloveboxException):
    """A read or write against the data store failed."""

    def __init__(self, table: str, operation: str, detail: str = None):
        super().__init__(
            detail=detail or f"Error during {operation} on {table}",
            error_code="DATA_ACCESS_ERROR",
            extra={"table": table, "operation": operation}
        )


class ValidationError(GloveboxException):
    """A stored record could not be interpreted."""

    def __init__(self, detail: str, table: str = None, record_id: Any = None):
        super().__init__(
            detail=detail,
            error_code="VALIDATION_ERROR",
            extra={"table": table, "record_id": record_id}
        )


class ScanError(GloveboxException):
    """Unexpected failure while running the scan."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            error_code="SCAN_ERROR"
        )
