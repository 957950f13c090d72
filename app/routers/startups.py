# =============================================================================
# app/routers/startups.py - Public Directory Endpoints
# =============================================================================
# Backs the directory, startup detail and registration pages:
# - GET  /startups                  filtered, paginated listing
# - GET  /startups/filters          distinct values for filter dropdowns
# - POST /startups/check-duplicate  registration duplicate guard
# - POST /startups/register         submit a registration for approval
# - GET  /startups/{id}             one startup (active or pending)
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status
from pydantic import BaseModel, Field

from app.dependencies import DirectoryDep, RegistrationDep
from app.exceptions import DataUnavailableError, StartupNotFoundError
from core.models.startup import (
    DirectoryPage,
    DirectoryQuery,
    DuplicateCheckResult,
    FilterOptions,
    RegistrationResult,
    Startup,
    StartupRegistration,
)
from core.services.startup_cache import LoadState

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request Models
# =============================================================================

class DuplicateCheckRequest(BaseModel):
    """Candidate name and website to check before registering."""
    name: str = Field(..., examples=["Acme Robotics"])
    website: str = Field(default="", examples=["https://acme-robotics.example"])


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=DirectoryPage)
async def list_startups(
    directory: DirectoryDep,
    page: Annotated[int, Query(ge=1, description="Page number")] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=100, description="Items per page")] = None,
    industry: Annotated[str | None, Query(description="Industry substring (case-insensitive)")] = None,
    team_size: Annotated[str | None, Query(description="Exact team size")] = None,
    business_model: Annotated[str | None, Query(description="Business model substring (case-insensitive)")] = None,
    search: Annotated[str | None, Query(description="Matches name, legal name or industries")] = None,
):
    """
    List startups with optional filters.

    Totals are computed from the full filtered list; a page past the end
    returns no startups rather than an error.
    """
    criteria = DirectoryQuery(
        industry=industry,
        team_size=team_size,
        business_model=business_model,
        search=search,
    )
    result = await directory.list_page(criteria, page=page, page_size=page_size)

    cache = directory.context.cache
    if cache.state == LoadState.FAILED:
        raise DataUnavailableError(cache.last_error)

    return result


@router.get("/filters", response_model=FilterOptions)
async def get_filter_options(directory: DirectoryDep):
    """
    Distinct industries, team sizes and business models.

    Recomputed from the current directory contents on every call.
    """
    return await directory.filter_options()


@router.post("/check-duplicate", response_model=DuplicateCheckResult)
async def check_duplicate(request: DuplicateCheckRequest, registration: RegistrationDep):
    """
    Check whether a startup looks like it is already listed.

    A duplicate is a normal result (is_duplicate=true), not an error.
    """
    return await registration.check_duplicate(request.name, request.website)


@router.post(
    "/register",
    response_model=RegistrationResult,
    status_code=status.HTTP_201_CREATED,
)
async def register_startup(
    payload: StartupRegistration,
    registration: RegistrationDep,
    response: Response,
):
    """
    Submit a startup for admin approval.

    Returns 201 with the pending startup, or 409 with the duplicate
    message when the startup looks like it is already listed.
    """
    result = await registration.register(payload)
    if not result.success:
        response.status_code = status.HTTP_409_CONFLICT
    return result


@router.get("/{startup_id}", response_model=Startup)
async def get_startup(
    startup_id: Annotated[str, Path(description="Startup id")],
    directory: DirectoryDep,
):
    """
    Get one startup by id.

    Looks in the directory first, then in pending registrations.
    """
    startup = await directory.get_startup(startup_id)
    if startup is None:
        raise StartupNotFoundError(startup_id)
    return startup
