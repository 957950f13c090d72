# =============================================================================
# core/models/startup.py - Startup Schemas
# =============================================================================
# These models define the contract for directory records:
# - Startup: One directory entry (loaded from CSV or registered)
# - TeamMember: Named contact attached to a startup (at most two)
# - StartupRegistration: Input payload for the registration action
# - DirectoryQuery: Optional filter criteria for listing startups
# - DirectoryPage: One page of a filtered listing
# - FilterOptions: Distinct values used to populate filter dropdowns
# - DuplicateCheckResult: Outcome of the registration guard
# =============================================================================

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from lib.utils import split_multi_value


def utc_now() -> datetime:
    """Timezone-aware current time used for record timestamps."""
    return datetime.now(timezone.utc)


class StartupStatus(str, Enum):
    """
    Lifecycle of a directory entry.

    - pending: Registered, waiting for admin approval
    - active: Visible in the directory
    - rejected: Declined by an admin

    Flow: pending -> active | rejected
    """
    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"


class TeamMember(BaseModel):
    """A named person attached to a startup."""

    name: str | None = None
    position: str | None = None
    email: str | None = None

    def is_empty(self) -> bool:
        return not (self.name or self.position or self.email)


class StartupFields(BaseModel):
    """
    Attributes shared by stored startups and registration payloads.

    Optional attributes stay None when the source has no value for them,
    never an empty string.
    """

    company_name: str = Field(
        default="",
        description="Company display name"
    )

    website: str = Field(
        default="",
        description="Company website URL"
    )

    logo: str | None = Field(default=None, description="Logo image URL")
    team_size: str | None = Field(default=None, description="Team size bucket, e.g. '11-50'")
    business_model_type: str | None = Field(
        default=None,
        description="Comma-joined business models, e.g. 'B2B, SaaS'"
    )
    founded_date: str | None = Field(default=None, description="Founding date as free text")
    industries: str | None = Field(
        default=None,
        description="Comma-joined industries, e.g. 'Fintech, AI'"
    )
    legal_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    social_media: str | None = None

    team_members: list[TeamMember] = Field(
        default_factory=list,
        max_length=2,
        description="Up to two named team members"
    )

    custom_fields: dict[str, str] = Field(
        default_factory=dict,
        description="Custom field id -> value"
    )

    def industry_list(self) -> list[str]:
        """Industries split on commas and trimmed."""
        return split_multi_value(self.industries)

    def business_model_list(self) -> list[str]:
        """Business models split on commas and trimmed."""
        return split_multi_value(self.business_model_type)


class Startup(StartupFields):
    """
    A directory entry.

    Example:
        {
            "id": "1",
            "company_name": "Acme",
            "website": "https://acme.com",
            "industries": "Fintech, AI",
            "status": "active",
            ...
        }
    """

    # CSV rows use the 1-based row ordinal; registrations use a UUID
    id: str = Field(..., description="Unique startup identifier")

    status: StartupStatus = Field(
        default=StartupStatus.ACTIVE,
        description="Lifecycle status"
    )

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class StartupRegistration(StartupFields):
    """
    Payload submitted by the registration form.

    Same shape as Startup minus id, status and timestamps.
    """

    company_name: str = Field(..., min_length=1, description="Company display name")
    website: str = Field(..., min_length=1, description="Company website URL")

    @field_validator("company_name", "website")
    @classmethod
    def strip_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    model_config = {
        "json_schema_extra": {
            "example": {
                "company_name": "Acme Robotics",
                "website": "https://acme-robotics.example",
                "industries": "Robotics, AI",
                "team_size": "11-50",
                "business_model_type": "B2B",
                "team_members": [{"name": "Jane Doe", "position": "CEO"}],
                "custom_fields": {"1": "Seed"},
            }
        }
    }


class DirectoryQuery(BaseModel):
    """
    Filter criteria for listing startups.

    Every criterion is optional; None or empty string means "no filter".
    """

    industry: str | None = None
    team_size: str | None = None
    business_model: str | None = None
    search: str | None = None


class DirectoryPage(BaseModel):
    """
    One page of a filtered listing.

    total and total_pages are computed from the full filtered list, so a
    page past the end has no items but still reports the real totals.
    """

    startups: list[Startup] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=12, ge=1)
    total_pages: int = Field(default=0, ge=0)


class FilterOptions(BaseModel):
    """Distinct values for the directory filter dropdowns."""

    industries: list[str] = Field(default_factory=list)
    team_sizes: list[str] = Field(default_factory=list)
    business_models: list[str] = Field(default_factory=list)


class DirectoryStats(BaseModel):
    """Counts shown on the admin dashboard."""

    total_startups: int = Field(default=0, ge=0, description="Active startups")
    pending_startups: int = Field(default=0, ge=0, description="Registrations awaiting approval")
    industry_count: int = Field(default=0, ge=0, description="Distinct industries")
    custom_field_count: int = Field(default=0, ge=0)
    startups_by_industry: dict[str, int] = Field(
        default_factory=dict,
        description="Industry -> number of active startups tagged with it"
    )


class DuplicateCheckResult(BaseModel):
    """Outcome of the registration duplicate guard."""

    is_duplicate: bool
    message: str


class RegistrationResult(BaseModel):
    """
    Outcome of a registration.

    A duplicate is an expected outcome, reported with success=False and
    the guard's message rather than raised.
    """

    success: bool
    message: str
    startup: Startup | None = None


class ImportResult(BaseModel):
    """Outcome of an admin CSV import."""

    success: bool = True
    imported: int = Field(default=0, ge=0)
