# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - startup.py: Startup records, registration payloads, listing/filter schemas
# - custom_field.py: Admin-defined custom field variants
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Startup Models - Directory records
# -----------------------------------------------------------------------------
from .startup import (
    DirectoryPage,
    DirectoryQuery,
    DirectoryStats,
    DuplicateCheckResult,
    FilterOptions,
    ImportResult,
    RegistrationResult,
    Startup,
    StartupFields,
    StartupRegistration,
    StartupStatus,
    TeamMember,
)

# -----------------------------------------------------------------------------
# Custom Field Models - Admin-defined attributes
# -----------------------------------------------------------------------------
from .custom_field import (
    BooleanField,
    BooleanFieldCreate,
    CustomField,
    CustomFieldCreate,
    CustomFieldType,
    DateField,
    DateFieldCreate,
    NumberField,
    NumberFieldCreate,
    SelectField,
    SelectFieldCreate,
    TextField,
    TextFieldCreate,
    build_custom_field,
    custom_field_create_adapter,
)

# -----------------------------------------------------------------------------
# __all__ - Explicit public API
# -----------------------------------------------------------------------------
__all__ = [
    # Startup
    "DirectoryPage",
    "DirectoryQuery",
    "DirectoryStats",
    "DuplicateCheckResult",
    "FilterOptions",
    "ImportResult",
    "RegistrationResult",
    "Startup",
    "StartupFields",
    "StartupRegistration",
    "StartupStatus",
    "TeamMember",
    # Custom fields
    "BooleanField",
    "BooleanFieldCreate",
    "CustomField",
    "CustomFieldCreate",
    "CustomFieldType",
    "DateField",
    "DateFieldCreate",
    "NumberField",
    "NumberFieldCreate",
    "SelectField",
    "SelectFieldCreate",
    "TextField",
    "TextFieldCreate",
    "build_custom_field",
    "custom_field_create_adapter",
]
