# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (error base class, multi-value field helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    ApplicationError,
    CsvFetchError,
    CsvParseError,
    contains_ci,
    split_multi_value,
)

__all__ = [
    "ApplicationError",
    "CsvFetchError",
    "CsvParseError",
    "contains_ci",
    "split_multi_value",
]
