# =============================================================================
# core/services/directory_service.py - Directory Queries
# =============================================================================
# Read side of the directory:
# - Filtering the cached startups by industry, team size, business model
#   and free-text search
# - Pagination over a filtered list (done by the caller, not the filter)
# - Distinct filter values for dropdowns
# - Lookup by id across active and pending startups
# - Admin dashboard counts
#
# The filter/paginate/distinct helpers are pure functions over a list of
# startups; DirectoryService wires them to the cache.
# =============================================================================

import logging
import math
from collections import Counter
from typing import Iterable, TypeVar

from core.models.startup import (
    DirectoryPage,
    DirectoryQuery,
    DirectoryStats,
    FilterOptions,
    Startup,
)
from core.services.context import DirectoryContext
from lib.utils import contains_ci

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# Pure Helpers
# =============================================================================

def filter_startups(startups: list[Startup], criteria: DirectoryQuery) -> list[Startup]:
    """
    Apply every non-empty criterion (AND-combined), preserving order.

    - industry: case-insensitive substring of industries ("Fin" matches "Fintech")
    - team_size: exact, case-sensitive match
    - business_model: case-insensitive substring of business_model_type
    - search: case-insensitive substring of company name, legal name or industries
    """
    result = list(startups)

    if criteria.industry:
        result = [s for s in result if contains_ci(s.industries, criteria.industry)]

    if criteria.team_size:
        result = [s for s in result if s.team_size == criteria.team_size]

    if criteria.business_model:
        result = [s for s in result if contains_ci(s.business_model_type, criteria.business_model)]

    if criteria.search:
        term = criteria.search
        result = [
            s for s in result
            if contains_ci(s.company_name, term)
            or contains_ci(s.legal_name, term)
            or contains_ci(s.industries, term)
        ]

    return result


def paginate(items: list[T], page: int, page_size: int) -> tuple[list[T], int]:
    """
    Slice one page out of a full list.

    Returns:
        (items on the page, total page count). A page past the end is
        an empty list, not an error.

    Example:
        paginate(list(range(25)), page=3, page_size=12)  # ([24], 3)
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    total_pages = math.ceil(len(items) / page_size)
    if page < 1:
        return [], total_pages

    start = (page - 1) * page_size
    return items[start:start + page_size], total_pages


def distinct_sorted(values: Iterable[str]) -> list[str]:
    """Unique non-empty values in ascending string order."""
    return sorted({value for value in values if value})


def industry_counts(startups: list[Startup]) -> dict[str, int]:
    """Number of startups per industry token, most common first."""
    counter = Counter(
        industry
        for startup in startups
        for industry in startup.industry_list()
        if industry
    )
    return dict(counter.most_common())


# =============================================================================
# Service
# =============================================================================

class DirectoryService:
    """
    Queries over the directory context.

    Every query makes sure the cache has been loaded first, and derived
    values are recomputed from the current cache on each call.
    """

    def __init__(self, context: DirectoryContext):
        self.context = context

    async def query(self, criteria: DirectoryQuery | None = None) -> list[Startup]:
        """
        Filter the active startups.

        Returns the full filtered list in ingestion order; callers paginate.
        """
        startups = await self.context.cache.ensure_loaded()
        return filter_startups(startups, criteria or DirectoryQuery())

    async def list_page(
        self,
        criteria: DirectoryQuery | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> DirectoryPage:
        """Filter, then slice out one page."""
        page_size = page_size or self.context.page_size
        startups = await self.query(criteria)
        items, total_pages = paginate(startups, page, page_size)

        return DirectoryPage(
            startups=items,
            total=len(startups),
            page=page,
            page_size=page_size,
            total_pages=total_pages,
        )

    # -------------------------------------------------------------------------
    # Filter Options
    # -------------------------------------------------------------------------

    async def industries(self) -> list[str]:
        startups = await self.context.cache.ensure_loaded()
        return distinct_sorted(i for s in startups for i in s.industry_list())

    async def team_sizes(self) -> list[str]:
        startups = await self.context.cache.ensure_loaded()
        return distinct_sorted(s.team_size for s in startups)

    async def business_models(self) -> list[str]:
        startups = await self.context.cache.ensure_loaded()
        return distinct_sorted(m for s in startups for m in s.business_model_list())

    async def filter_options(self) -> FilterOptions:
        return FilterOptions(
            industries=await self.industries(),
            team_sizes=await self.team_sizes(),
            business_models=await self.business_models(),
        )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    async def get_startup(self, startup_id: str) -> Startup | None:
        """
        Find a startup by id among active, then pending, startups.

        Returns None when nothing matches.
        """
        startups = await self.context.cache.ensure_loaded()
        for startup in [*startups, *self.context.pending]:
            if startup.id == startup_id:
                return startup
        return None

    def pending(self) -> list[Startup]:
        """Registrations awaiting approval, oldest first."""
        return list(self.context.pending)

    async def stats(self) -> DirectoryStats:
        """Counts for the admin dashboard."""
        startups = await self.context.cache.ensure_loaded()
        return DirectoryStats(
            total_startups=len(startups),
            pending_startups=len(self.context.pending),
            industry_count=len(await self.industries()),
            custom_field_count=len(self.context.custom_fields),
            startups_by_industry=industry_counts(startups),
        )
