# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - ApplicationError and the ingestion errors built on it
# - Helpers for the comma-joined multi-value text fields
# =============================================================================

from typing import Any


# =============================================================================
# Multi-value Field Utilities
# =============================================================================

def split_multi_value(value: str | None) -> list[str]:
    """
    Split a comma-joined field into trimmed tokens.

    Empty tokens are kept: "Fintech, ,AI" -> ["Fintech", "", "AI"].
    A None or empty value yields an empty list.

    Example:
        split_multi_value("Fintech, AI")  # ["Fintech", "AI"]
    """
    if not value:
        return []
    return [token.strip() for token in value.split(",")]


def contains_ci(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test; a missing haystack never matches."""
    if haystack is None:
        return False
    return needle.lower() in haystack.lower()


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


# =============================================================================
# Ingestion Errors
# =============================================================================

class CsvFetchError(ApplicationError):
    """Raised when the startup CSV cannot be retrieved."""

    def __init__(self, url: str, error: str, attempts: int = 1):
        super().__init__(
            message=f"Failed to fetch startup CSV after {attempts} attempt(s): {error}",
            code="CSV_FETCH_FAILED",
            suggestion="Check STARTUP_CSV_URL and network connectivity, then reload the cache",
            details={"url": url, "error": error, "attempts": attempts},
        )


class CsvParseError(ApplicationError):
    """Raised when CSV text has no usable header row."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Failed to parse startup CSV: {error}",
            code="CSV_PARSE_FAILED",
            suggestion="Make sure the first line is a header row such as 'Company Name,Website,...'",
            details={"error": error},
        )
