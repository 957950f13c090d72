# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the directory models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to JSON properly
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.models import (
    DirectoryPage,
    DirectoryQuery,
    RegistrationResult,
    Startup,
    StartupRegistration,
    StartupStatus,
    TeamMember,
)


# =============================================================================
# Startup Model Tests
# =============================================================================

class TestStartup:
    """Tests for the Startup model."""

    def test_minimal_startup(self):
        """Only id is required; everything else has a default."""
        startup = Startup(id="1")

        assert startup.company_name == ""
        assert startup.website == ""
        assert startup.industries is None
        assert startup.team_members == []
        assert startup.custom_fields == {}
        assert startup.status == StartupStatus.ACTIVE
        assert isinstance(startup.created_at, datetime)
        assert startup.created_at.tzinfo is not None

    def test_missing_id(self):
        with pytest.raises(ValidationError):
            Startup(company_name="Acme")

    def test_status_from_string(self):
        assert Startup(id="1", status="pending").status == StartupStatus.PENDING

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            Startup(id="1", status="archived")

    def test_at_most_two_team_members(self):
        members = [{"name": f"Person {i}"} for i in range(3)]

        with pytest.raises(ValidationError):
            Startup(id="1", team_members=members)

    def test_industry_list(self):
        startup = Startup(id="1", industries="Fintech,  AI ,")

        # Empty tokens are kept; distinct-value helpers drop them
        assert startup.industry_list() == ["Fintech", "AI", ""]

    def test_multi_value_lists_when_unset(self):
        startup = Startup(id="1")

        assert startup.industry_list() == []
        assert startup.business_model_list() == []

    def test_serialization(self):
        startup = Startup(
            id="1",
            company_name="Acme",
            website="https://acme.com",
            team_members=[TeamMember(name="Jane Doe", position="CEO")],
        )

        data = startup.model_dump(mode="json")

        assert data["status"] == "active"
        assert data["team_members"][0] == {"name": "Jane Doe", "position": "CEO", "email": None}
        assert isinstance(data["created_at"], str)


class TestTeamMember:
    """Tests for the TeamMember model."""

    def test_is_empty(self):
        assert TeamMember().is_empty() is True
        assert TeamMember(email="a@b.co").is_empty() is False


# =============================================================================
# Registration Model Tests
# =============================================================================

class TestStartupRegistration:
    """Tests for the StartupRegistration payload."""

    def test_valid_registration(self):
        registration = StartupRegistration(company_name=" Acme ", website=" https://acme.com ")

        assert registration.company_name == "Acme"
        assert registration.website == "https://acme.com"

    @pytest.mark.parametrize("field", ["company_name", "website"])
    def test_required_fields(self, field):
        data = {"company_name": "Acme", "website": "https://acme.com"}
        del data[field]

        with pytest.raises(ValidationError):
            StartupRegistration(**data)

    @pytest.mark.parametrize("field", ["company_name", "website"])
    def test_blank_required_fields(self, field):
        data = {"company_name": "Acme", "website": "https://acme.com", field: "   "}

        with pytest.raises(ValidationError):
            StartupRegistration(**data)


# =============================================================================
# Listing Model Tests
# =============================================================================

class TestListingModels:
    """Tests for query and page models."""

    def test_empty_query(self):
        query = DirectoryQuery()

        assert query.industry is None
        assert query.search is None

    def test_page_defaults(self):
        page = DirectoryPage()

        assert page.startups == []
        assert page.page == 1
        assert page.page_size == 12
        assert page.total_pages == 0

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            DirectoryPage(page=0)

    def test_registration_result_without_startup(self):
        result = RegistrationResult(success=False, message="duplicate")

        assert result.startup is None
