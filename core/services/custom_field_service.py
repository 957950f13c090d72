# =============================================================================
# core/services/custom_field_service.py - Custom Field Registry
# =============================================================================
# In-memory registry of admin-defined custom fields.
#
# Fields live for the lifetime of the process. The registry also checks
# registration values against the definitions before they are stored on a
# startup.
# =============================================================================

import logging
import time
from datetime import datetime, timezone

from core.models.custom_field import (
    CustomField,
    CustomFieldBase,
    NumberFieldCreate,
    SelectFieldCreate,
    build_custom_field,
)
from core.models.startup import utc_now
from app.exceptions import CustomFieldNotFoundError, CustomFieldValueError

logger = logging.getLogger(__name__)

_SEEDED_AT = datetime(2023, 1, 1, tzinfo=timezone.utc)


def default_custom_fields() -> list[CustomField]:
    """The fields every new registry starts with."""
    return [
        build_custom_field(
            SelectFieldCreate(
                name="Funding Stage",
                options=["Pre-seed", "Seed", "Series A", "Series B", "Series C+", "Bootstrapped"],
            ),
            field_id="1",
            created_at=_SEEDED_AT,
        ),
        build_custom_field(
            NumberFieldCreate(name="Number of Employees"),
            field_id="2",
            created_at=_SEEDED_AT,
        ),
    ]


class CustomFieldRegistry:
    """
    Ordered, in-memory collection of custom field definitions.

    Example:
        registry = CustomFieldRegistry()
        field = registry.create(TextFieldCreate(name="Pitch Deck"))
        registry.validate_values({field.id: "https://..."})
    """

    def __init__(self, fields: list[CustomField] | None = None):
        self._fields: list[CustomField] = list(default_custom_fields() if fields is None else fields)

    def list_fields(self) -> list[CustomField]:
        """All definitions in insertion order."""
        return list(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def get(self, field_id: str) -> CustomField | None:
        return next((field for field in self._fields if field.id == field_id), None)

    def create(self, payload: CustomFieldBase) -> CustomField:
        """
        Add a new field definition.

        The id is derived from the current time in milliseconds, bumped
        until it is unique within the registry.
        """
        stamp = int(time.time() * 1000)
        while self.get(str(stamp)) is not None:
            stamp += 1

        field = build_custom_field(payload, field_id=str(stamp), created_at=utc_now())
        self._fields.append(field)
        logger.info(f"Created custom field {field.id} ({field.type}): {field.name}")
        return field

    def delete(self, field_id: str) -> CustomField:
        """
        Remove a field definition.

        Raises:
            CustomFieldNotFoundError: If no field has this id
        """
        field = self.get(field_id)
        if field is None:
            raise CustomFieldNotFoundError(field_id)

        self._fields = [existing for existing in self._fields if existing.id != field_id]
        logger.info(f"Deleted custom field {field_id}")
        return field

    def validate_values(self, values: dict[str, str]) -> dict[str, str]:
        """
        Check registration values against the definitions.

        Blank values are treated as not provided. Every problem is
        collected before raising, keyed by field id.

        Returns:
            Normalised values, keyed by field id

        Raises:
            CustomFieldValueError: On unknown ids, invalid values or
                missing required fields
        """
        errors: dict[str, str] = {}
        cleaned: dict[str, str] = {}

        for field_id, raw in values.items():
            field = self.get(field_id)
            if field is None:
                errors[field_id] = "unknown custom field"
                continue

            raw = raw.strip()
            if not raw:
                continue

            try:
                cleaned[field_id] = field.normalize_value(raw)
            except ValueError as e:
                errors[field_id] = str(e)

        for field in self._fields:
            if field.required and field.id not in cleaned and field.id not in errors:
                errors[field.id] = f"{field.name} is required"

        if errors:
            raise CustomFieldValueError(errors)

        return cleaned
