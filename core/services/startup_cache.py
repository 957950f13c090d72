# =============================================================================
# core/services/startup_cache.py - In-Memory Startup Cache
# =============================================================================
# Owns the process-resident list of active startups.
#
# The cache is populated from an injected loader (normally HttpCsvLoader)
# and tracks an explicit load state:
#
#   not_loaded --ensure_loaded()--> loaded   (possibly with zero records)
#                              \--> failed   (last_error is set)
#
# ensure_loaded() never raises: a failed load is logged, recorded and seen
# by callers as an empty list. Callers that need to tell "no data" from
# "load failed" check `state`.
#
# There is no lock. Two requests hitting a cold cache may both fetch; the
# source is read-only so the last write simply wins.
# =============================================================================

import logging
from datetime import datetime
from enum import Enum

from core.models.startup import Startup, utc_now
from core.services.csv_loader import CsvLoader
from core.services.csv_parser import ParserMode, parse_startup_csv
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    """
    Cache load status.

    - not_loaded: Nothing fetched yet (or invalidated)
    - loaded: Last load succeeded, possibly with zero records
    - failed: Last load raised; records are empty
    """
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"


class StartupCache:
    """
    Explicit cache of active startups.

    Example:
        cache = StartupCache(loader=HttpCsvLoader(url))
        startups = await cache.ensure_loaded()
        if cache.state == LoadState.FAILED:
            print(cache.last_error)
    """

    def __init__(self, loader: CsvLoader, parser_mode: ParserMode = "legacy"):
        self._loader = loader
        self._parser_mode = parser_mode
        self._records: list[Startup] = []
        self._state = LoadState.NOT_LOADED
        self._last_error: str | None = None
        self._loaded_at: datetime | None = None

    # -------------------------------------------------------------------------
    # Load State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def loaded_at(self) -> datetime | None:
        return self._loaded_at

    @property
    def parser_mode(self) -> ParserMode:
        return self._parser_mode

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def ensure_loaded(self) -> list[Startup]:
        """
        Load records unless a load has already succeeded.

        A failed load is retried on the next call. A successful load with
        zero records is not.

        Returns:
            Snapshot of the active records (empty on failure)
        """
        if self._state != LoadState.LOADED:
            await self.reload()
        return self.records

    async def reload(self) -> list[Startup]:
        """
        Fetch and parse the source, replacing the cached records.

        Returns:
            Snapshot of the active records (empty on failure)
        """
        try:
            text = await self._loader()
            startups = parse_startup_csv(text, self._parser_mode)

        except ApplicationError as e:
            self._mark_failed(str(e))
            logger.error(f"Error loading startups from CSV: {e}")
            return []

        except Exception as e:
            self._mark_failed(f"{type(e).__name__}: {e}")
            logger.exception(f"Unexpected error loading startups from CSV: {e}")
            return []

        self._records = startups
        self._state = LoadState.LOADED
        self._last_error = None
        self._loaded_at = utc_now()
        logger.info(f"Loaded {len(startups)} startups from CSV")
        return self.records

    def invalidate(self) -> None:
        """Drop cached records; the next ensure_loaded() fetches again."""
        self._records = []
        self._state = LoadState.NOT_LOADED
        self._last_error = None
        self._loaded_at = None
        logger.info("Startup cache invalidated")

    def _mark_failed(self, error: str) -> None:
        self._records = []
        self._state = LoadState.FAILED
        self._last_error = error
        self._loaded_at = None

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    @property
    def records(self) -> list[Startup]:
        """Snapshot of the active records in ingestion order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, startup: Startup) -> None:
        self._records.append(startup)

    def remove(self, startup_id: str) -> Startup | None:
        """Remove and return the record with this id, or None."""
        for index, startup in enumerate(self._records):
            if startup.id == startup_id:
                return self._records.pop(index)
        return None
