# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class DirectoryException(Exception):
    """
    Base exception for the Startup Directory API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "DIRECTORY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Startup Exceptions
# =============================================================================

class StartupNotFoundError(DirectoryException):
    """Raised when a startup ID is in neither the active nor the pending list."""

    def __init__(self, startup_id: str):
        super().__init__(
            message=f"Startup not found: {startup_id}",
            code="STARTUP_NOT_FOUND",
            status_code=404,
            suggestion="Check that the startup id is correct and the startup hasn't been deleted",
            details={"startup_id": startup_id}
        )


class StartupNotPendingError(DirectoryException):
    """Raised when rejecting a startup that is not awaiting approval."""

    def __init__(self, startup_id: str, status: str):
        super().__init__(
            message=f"Startup is not pending approval: {startup_id}",
            code="STARTUP_NOT_PENDING",
            status_code=400,
            suggestion="Only pending registrations can be rejected",
            details={"startup_id": startup_id, "status": status}
        )


# =============================================================================
# Data Source Exceptions
# =============================================================================

class DataUnavailableError(DirectoryException):
    """Raised when the startup CSV could not be loaded."""

    def __init__(self, error: str | None):
        super().__init__(
            message="Startup data is currently unavailable",
            code="DATA_UNAVAILABLE",
            status_code=503,
            suggestion="Try again later or reload the cache via POST /api/v1/admin/cache/reload",
            details={"error": error}
        )


class InvalidCsvError(DirectoryException):
    """Raised when an uploaded CSV cannot be parsed."""

    def __init__(self, filename: str | None, error: str):
        super().__init__(
            message=f"Failed to read CSV: {error}",
            code="INVALID_CSV",
            status_code=400,
            suggestion="Upload a UTF-8 CSV whose first line is a header row (Company Name, Website, ...)",
            details={"filename": filename, "error": error}
        )


class FileTooLargeError(DirectoryException):
    """Raised when an uploaded CSV exceeds the size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


# =============================================================================
# Custom Field Exceptions
# =============================================================================

class CustomFieldNotFoundError(DirectoryException):
    """Raised when a custom field ID doesn't exist."""

    def __init__(self, field_id: str):
        super().__init__(
            message=f"Custom field not found: {field_id}",
            code="CUSTOM_FIELD_NOT_FOUND",
            status_code=404,
            suggestion="List custom fields via GET /api/v1/custom-fields to get valid ids",
            details={"field_id": field_id}
        )


class CustomFieldValueError(DirectoryException):
    """Raised when registration values don't satisfy the custom field definitions."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(
            message=f"Invalid custom field values: {len(errors)} problem(s)",
            code="CUSTOM_FIELD_INVALID",
            status_code=422,
            suggestion="Fix the listed custom fields and submit again",
            details={"errors": errors}
        )
        self.errors = errors


# =============================================================================
# Exception Handlers
# =============================================================================

async def directory_exception_handler(
    request: Request,
    exc: DirectoryException
) -> JSONResponse:
    """
    Convert DirectoryException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
