# =============================================================================
# app/routers/admin.py - Admin Dashboard Endpoints
# =============================================================================
# Backs the admin dashboard:
# - dashboard counts and the pending-approval queue
# - approve / reject / delete actions
# - CSV import and cache reload
#
# Actions are mock actions: they change in-memory state only.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, Path, UploadFile
from pydantic import BaseModel

from app.config import settings
from app.dependencies import ContextDep, DirectoryDep, RegistrationDep
from app.exceptions import FileTooLargeError, InvalidCsvError
from core.models.startup import DirectoryStats, ImportResult, Startup
from core.services.startup_cache import LoadState

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class ActionResponse(BaseModel):
    """Result of an approve/reject/delete action."""
    success: bool = True
    startup: Startup


class CacheReloadResponse(BaseModel):
    """Cache state after a forced reload."""
    state: LoadState
    records: int
    error: str | None = None


# =============================================================================
# Dashboard
# =============================================================================

@router.get("/stats", response_model=DirectoryStats)
async def get_stats(directory: DirectoryDep):
    """Counts for the dashboard cards and the per-industry breakdown."""
    return await directory.stats()


@router.get("/pending", response_model=list[Startup])
async def list_pending(directory: DirectoryDep):
    """Registrations awaiting approval, oldest first."""
    return directory.pending()


# =============================================================================
# Startup Actions
# =============================================================================

@router.post("/startups/{startup_id}/approve", response_model=ActionResponse)
async def approve_startup(
    startup_id: Annotated[str, Path(description="Startup id")],
    registration: RegistrationDep,
):
    """Move a pending registration into the directory."""
    startup = await registration.approve(startup_id)
    return ActionResponse(startup=startup)


@router.post("/startups/{startup_id}/reject", response_model=ActionResponse)
async def reject_startup(
    startup_id: Annotated[str, Path(description="Startup id")],
    registration: RegistrationDep,
):
    """Decline a pending registration."""
    startup = await registration.reject(startup_id)
    return ActionResponse(startup=startup)


@router.delete("/startups/{startup_id}", response_model=ActionResponse)
async def delete_startup(
    startup_id: Annotated[str, Path(description="Startup id")],
    registration: RegistrationDep,
):
    """Remove a startup from the directory or the pending queue."""
    startup = await registration.delete(startup_id)
    return ActionResponse(startup=startup)


# =============================================================================
# Data Management
# =============================================================================

@router.post("/import", response_model=ImportResult)
async def import_csv(
    file: Annotated[UploadFile, File(description="CSV file to import")],
    registration: RegistrationDep,
):
    """
    Import startups from an uploaded CSV.

    Uses the same header names and parser mode as the main data source.
    Imported rows are added to the directory as active startups.
    """
    filename = file.filename or "import.csv"
    content = await file.read()

    if len(content) > settings.max_upload_size_bytes:
        raise FileTooLargeError(len(content) / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    try:
        text = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise InvalidCsvError(filename, f"File is not valid UTF-8: {e}")

    return await registration.import_csv(text, filename=filename)


@router.post("/cache/reload", response_model=CacheReloadResponse)
async def reload_cache(context: ContextDep):
    """
    Refetch the startup CSV now.

    Replaces the cached directory; approvals and imports made since the
    last load are dropped.
    """
    await context.cache.reload()
    return CacheReloadResponse(
        state=context.cache.state,
        records=len(context.cache),
        error=context.cache.last_error,
    )
