# =============================================================================
# core/services/registration_service.py - Registration & Admin Actions
# =============================================================================
# Write side of the directory. Every action:
# - logs what it does
# - waits `action_delay_seconds` to mimic a database round trip
# - mutates only in-memory state (nothing survives a restart)
#
# Actions:
# - register:   duplicate guard -> custom field validation -> pending list
# - approve:    pending -> active
# - reject:     pending -> rejected (dropped from the pending list)
# - delete:     remove from active or pending
# - import_csv: parse an uploaded CSV and append its rows as active
# =============================================================================

import asyncio
import logging
from uuid import uuid4

from core.models.startup import (
    DuplicateCheckResult,
    ImportResult,
    RegistrationResult,
    Startup,
    StartupRegistration,
    StartupStatus,
    utc_now,
)
from core.services.context import DirectoryContext
from core.services.csv_parser import parse_startup_csv
from core.services.duplicate_service import check_duplicate
from core.services.startup_cache import LoadState
from app.exceptions import (
    DataUnavailableError,
    InvalidCsvError,
    StartupNotFoundError,
    StartupNotPendingError,
)
from lib.utils import CsvParseError

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Registration and admin actions over the directory context.

    Example:
        service = RegistrationService(context)
        result = await service.register(payload)
        if result.success:
            await service.approve(result.startup.id)
    """

    def __init__(self, context: DirectoryContext):
        self.context = context

    async def _simulate_latency(self) -> None:
        if self.context.action_delay_seconds > 0:
            await asyncio.sleep(self.context.action_delay_seconds)

    def _find_pending(self, startup_id: str) -> Startup | None:
        return next((s for s in self.context.pending if s.id == startup_id), None)

    async def _require_loaded(self) -> list[Startup]:
        """
        Make sure the directory is loaded before records are added to it.

        Raises:
            DataUnavailableError: If the source CSV could not be loaded
        """
        cache = self.context.cache
        active = await cache.ensure_loaded()
        if cache.state != LoadState.LOADED:
            raise DataUnavailableError(cache.last_error)
        return active

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    async def check_duplicate(self, name: str, website: str) -> DuplicateCheckResult:
        """Compare a candidate against active and pending startups."""
        active = await self.context.cache.ensure_loaded()
        return check_duplicate(
            name,
            website,
            [*active, *self.context.pending],
            min_name_length=self.context.duplicate_min_name_length,
        )

    async def register(self, payload: StartupRegistration) -> RegistrationResult:
        """
        Register a new startup for admin approval.

        Returns:
            RegistrationResult; success=False with the guard's message when
            the startup looks like a duplicate

        Raises:
            CustomFieldValueError: If custom field values are invalid
        """
        duplicate = await self.check_duplicate(payload.company_name, payload.website)
        if duplicate.is_duplicate:
            logger.info(f"Registration rejected as duplicate: {payload.company_name}")
            return RegistrationResult(success=False, message=duplicate.message)

        custom_fields = self.context.custom_fields.validate_values(payload.custom_fields)

        logger.info(f"Registering startup: {payload.company_name}")
        await self._simulate_latency()

        now = utc_now()
        startup = Startup(
            **payload.model_dump(exclude={"custom_fields"}),
            id=str(uuid4()),
            status=StartupStatus.PENDING,
            created_at=now,
            updated_at=now,
            custom_fields=custom_fields,
        )
        self.context.pending.append(startup)

        return RegistrationResult(
            success=True,
            message="Your startup has been submitted and is awaiting approval.",
            startup=startup,
        )

    # -------------------------------------------------------------------------
    # Admin Actions
    # -------------------------------------------------------------------------

    async def approve(self, startup_id: str) -> Startup:
        """
        Move a pending startup into the directory.

        Approving an already active startup is a no-op.

        Raises:
            StartupNotFoundError: If the id is neither pending nor active
            DataUnavailableError: If the directory could not be loaded
        """
        logger.info(f"Approving startup: {startup_id}")
        await self._simulate_latency()

        active = await self._require_loaded()
        pending = self._find_pending(startup_id)
        if pending is None:
            existing = next((s for s in active if s.id == startup_id), None)
            if existing is None:
                raise StartupNotFoundError(startup_id)
            return existing

        self.context.pending.remove(pending)
        approved = pending.model_copy(update={
            "status": StartupStatus.ACTIVE,
            "updated_at": utc_now(),
        })
        self.context.cache.add(approved)
        return approved

    async def reject(self, startup_id: str) -> Startup:
        """
        Decline a pending registration.

        Raises:
            StartupNotFoundError: If the id is unknown
            StartupNotPendingError: If the startup is already active
        """
        logger.info(f"Rejecting startup: {startup_id}")
        await self._simulate_latency()

        pending = self._find_pending(startup_id)
        if pending is None:
            active = await self.context.cache.ensure_loaded()
            if any(s.id == startup_id for s in active):
                raise StartupNotPendingError(startup_id, StartupStatus.ACTIVE.value)
            raise StartupNotFoundError(startup_id)

        self.context.pending.remove(pending)
        return pending.model_copy(update={
            "status": StartupStatus.REJECTED,
            "updated_at": utc_now(),
        })

    async def delete(self, startup_id: str) -> Startup:
        """
        Remove a startup from the directory or the pending list.

        Raises:
            StartupNotFoundError: If the id is unknown
        """
        logger.info(f"Deleting startup: {startup_id}")
        await self._simulate_latency()

        await self.context.cache.ensure_loaded()
        removed = self.context.cache.remove(startup_id)
        if removed is not None:
            return removed

        pending = self._find_pending(startup_id)
        if pending is None:
            raise StartupNotFoundError(startup_id)

        self.context.pending.remove(pending)
        return pending

    async def import_csv(self, text: str, filename: str | None = None) -> ImportResult:
        """
        Append the rows of an uploaded CSV to the directory.

        Imported rows get fresh UUID ids so they never collide with the
        row-ordinal ids of the source CSV.

        Raises:
            InvalidCsvError: If the CSV has no usable header
            DataUnavailableError: If the directory could not be loaded
        """
        logger.info(f"Importing CSV data: {filename or '<upload>'}")

        try:
            parsed = parse_startup_csv(text, self.context.cache.parser_mode)
        except CsvParseError as e:
            raise InvalidCsvError(filename, e.message)

        await self._simulate_latency()
        await self._require_loaded()

        for startup in parsed:
            self.context.cache.add(startup.model_copy(update={"id": str(uuid4())}))

        logger.info(f"Imported {len(parsed)} startups")
        return ImportResult(success=True, imported=len(parsed))
