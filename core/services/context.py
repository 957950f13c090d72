# =============================================================================
# core/services/context.py - Directory Context
# =============================================================================
# Bundles the in-memory state of one running directory:
# - cache: active startups loaded from the CSV source
# - pending: registrations awaiting admin approval
# - custom_fields: admin-defined field registry
# plus the tunables the services need.
#
# The API builds one context at startup and hands it to services through
# FastAPI dependencies; tests build their own with a fake loader.
# =============================================================================

from dataclasses import dataclass, field

from core.models.startup import Startup
from core.services.csv_loader import CsvLoader, HttpCsvLoader
from core.services.custom_field_service import CustomFieldRegistry
from core.services.startup_cache import StartupCache


@dataclass
class DirectoryContext:
    """In-memory directory state shared by the services."""

    cache: StartupCache
    custom_fields: CustomFieldRegistry = field(default_factory=CustomFieldRegistry)
    pending: list[Startup] = field(default_factory=list)

    page_size: int = 12
    duplicate_min_name_length: int = 3
    action_delay_seconds: float = 1.0

    @classmethod
    def from_settings(cls, settings, loader: CsvLoader | None = None) -> "DirectoryContext":
        """
        Build a context from application settings.

        Args:
            settings: app.config.Settings instance
            loader: Optional loader override (defaults to HttpCsvLoader)
        """
        return cls(
            cache=StartupCache(
                loader=loader or HttpCsvLoader.from_settings(settings),
                parser_mode=settings.CSV_PARSER_MODE,
            ),
            page_size=settings.DIRECTORY_PAGE_SIZE,
            duplicate_min_name_length=settings.DUPLICATE_MIN_NAME_LENGTH,
            action_delay_seconds=settings.MOCK_ACTION_DELAY_SECONDS,
        )
