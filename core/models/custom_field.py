# =============================================================================
# core/models/custom_field.py - Custom Field Schemas
# =============================================================================
# Admin-defined extra attributes collected at registration time.
#
# A custom field is a tagged variant discriminated on `type`:
# - text:    any string
# - number:  numeric string, stored normalised ("12", "3.5")
# - date:    ISO date (YYYY-MM-DD)
# - boolean: true/false/yes/no/1/0, stored as "true"/"false"
# - select:  one of an ordered list of options (only this variant has options)
#
# Each variant knows how to validate and normalise a raw string value, so
# registration values are checked at the boundary before they are merged
# into Startup.custom_fields.
# =============================================================================

import math
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class CustomFieldType(str, Enum):
    """Supported custom field types."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    SELECT = "select"


_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


# =============================================================================
# Creation Payloads
# =============================================================================

class CustomFieldBase(BaseModel):
    """Attributes shared by every field variant."""

    # Reject attributes that belong to another variant (e.g. options on text)
    model_config = {"extra": "forbid"}

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    required: bool = Field(default=False, description="Must be filled in at registration")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    def normalize_value(self, raw: str) -> str:
        """
        Validate a raw registration value and return its stored form.

        Raises:
            ValueError: If the value is not acceptable for this field type
        """
        return raw


class TextFieldCreate(CustomFieldBase):
    type: Literal["text"] = "text"


class NumberFieldCreate(CustomFieldBase):
    type: Literal["number"] = "number"

    def normalize_value(self, raw: str) -> str:
        try:
            number = float(raw)
        except ValueError:
            raise ValueError(f"'{raw}' is not a number")
        if not math.isfinite(number):
            raise ValueError(f"'{raw}' is not a finite number")
        return str(int(number)) if number.is_integer() else str(number)


class DateFieldCreate(CustomFieldBase):
    type: Literal["date"] = "date"

    def normalize_value(self, raw: str) -> str:
        try:
            return date.fromisoformat(raw).isoformat()
        except ValueError:
            raise ValueError(f"'{raw}' is not a date in YYYY-MM-DD format")


class BooleanFieldCreate(CustomFieldBase):
    type: Literal["boolean"] = "boolean"

    def normalize_value(self, raw: str) -> str:
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return "true"
        if lowered in _FALSE_VALUES:
            return "false"
        raise ValueError(f"'{raw}' is not a boolean (use true/false)")


class SelectFieldCreate(CustomFieldBase):
    type: Literal["select"] = "select"

    options: list[str] = Field(
        ...,
        min_length=1,
        description="Allowed values, in display order"
    )

    @field_validator("options")
    @classmethod
    def clean_options(cls, options: list[str]) -> list[str]:
        cleaned = [option.strip() for option in options]
        if any(not option for option in cleaned):
            raise ValueError("options must not be blank")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("options must be unique")
        return cleaned

    def normalize_value(self, raw: str) -> str:
        if raw not in self.options:
            raise ValueError(f"'{raw}' is not one of: {', '.join(self.options)}")
        return raw


CustomFieldCreate = Annotated[
    Union[
        TextFieldCreate,
        NumberFieldCreate,
        DateFieldCreate,
        BooleanFieldCreate,
        SelectFieldCreate,
    ],
    Field(discriminator="type"),
]

custom_field_create_adapter = TypeAdapter(CustomFieldCreate)


# =============================================================================
# Stored Definitions
# =============================================================================

class StoredField(BaseModel):
    """Identity assigned by the registry when a field is created."""

    id: str = Field(..., description="Unique field identifier")
    created_at: datetime = Field(..., description="When the field was created")


class TextField(TextFieldCreate, StoredField):
    pass


class NumberField(NumberFieldCreate, StoredField):
    pass


class DateField(DateFieldCreate, StoredField):
    pass


class BooleanField(BooleanFieldCreate, StoredField):
    pass


class SelectField(SelectFieldCreate, StoredField):
    pass


CustomField = Annotated[
    Union[TextField, NumberField, DateField, BooleanField, SelectField],
    Field(discriminator="type"),
]

_DEFINITION_TYPES: dict[str, type[StoredField]] = {
    CustomFieldType.TEXT.value: TextField,
    CustomFieldType.NUMBER.value: NumberField,
    CustomFieldType.DATE.value: DateField,
    CustomFieldType.BOOLEAN.value: BooleanField,
    CustomFieldType.SELECT.value: SelectField,
}


def build_custom_field(payload: CustomFieldBase, field_id: str, created_at: datetime) -> CustomField:
    """Turn a creation payload into a stored definition of the same variant."""
    definition_type = _DEFINITION_TYPES[payload.type]
    return definition_type(**payload.model_dump(), id=field_id, created_at=created_at)
