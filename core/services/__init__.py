# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .context import DirectoryContext
from .csv_loader import CsvLoader, HttpCsvLoader
from .csv_parser import parse_startup_csv, split_legacy_row
from .custom_field_service import CustomFieldRegistry
from .directory_service import DirectoryService, filter_startups, paginate
from .duplicate_service import check_duplicate
from .registration_service import RegistrationService
from .startup_cache import LoadState, StartupCache

__all__ = [
    "DirectoryContext",
    "CsvLoader",
    "HttpCsvLoader",
    "parse_startup_csv",
    "split_legacy_row",
    "CustomFieldRegistry",
    "DirectoryService",
    "filter_startups",
    "paginate",
    "check_duplicate",
    "RegistrationService",
    "LoadState",
    "StartupCache",
]
