# =============================================================================
# tests/test_duplicate_service.py - Duplicate Guard Tests
# =============================================================================
# Run with: pytest tests/test_duplicate_service.py -v
# =============================================================================

from core.models.startup import Startup
from core.services.duplicate_service import (
    SIMILAR_NAME_MESSAGE,
    UNIQUE_MESSAGE,
    check_duplicate,
)


class TestCheckDuplicate:
    """Tests for check_duplicate over the sample startups."""

    def test_exact_name_is_case_insensitive(self, sample_startups):
        result = check_duplicate("acme", "https://other.com", sample_startups)

        assert result.is_duplicate is True
        assert result.message == 'A startup with the name "acme" already exists in our directory.'

    def test_exact_website(self, sample_startups):
        result = check_duplicate("Other", "https://ACME.COM", sample_startups)

        assert result.is_duplicate is True
        assert "website" in result.message

    def test_name_wins_over_website(self, sample_startups):
        result = check_duplicate("Acme", "https://gammapay.co", sample_startups)

        assert "name" in result.message
        assert "website" not in result.message

    def test_similar_name(self, sample_startups):
        """A candidate contained in an existing name is flagged."""
        result = check_duplicate("Beta", "https://beta.io", sample_startups)

        assert result.is_duplicate is True
        assert result.message == SIMILAR_NAME_MESSAGE

    def test_similar_name_other_direction(self, sample_startups):
        result = check_duplicate("Acme Robotics", "https://acme-robotics.io", sample_startups)

        assert result.message == SIMILAR_NAME_MESSAGE

    def test_unique(self, sample_startups):
        result = check_duplicate("Zeta Robotics", "https://zeta.io", sample_startups)

        assert result.is_duplicate is False
        assert result.message == UNIQUE_MESSAGE

    def test_whitespace_is_ignored(self, sample_startups):
        result = check_duplicate("  Gamma Pay  ", "", sample_startups)

        assert result.is_duplicate is True
        assert "name" in result.message

    def test_empty_website_never_matches(self):
        existing = [Startup(id="1", company_name="NoSite", website="")]

        result = check_duplicate("Zeta Robotics", "", existing)

        assert result.is_duplicate is False

    def test_short_names_skip_similar_check(self):
        existing = [Startup(id="1", company_name="Acme", website="https://acme.com")]

        assert check_duplicate("A", "https://a.io", existing).is_duplicate is False
        assert check_duplicate("Ac", "https://ac.io", existing).is_duplicate is False

    def test_short_existing_name_skips_similar_check(self):
        existing = [Startup(id="1", company_name="Go", website="https://go.dev")]

        assert check_duplicate("Google", "https://google.com", existing).is_duplicate is False

    def test_min_name_length_is_configurable(self):
        existing = [Startup(id="1", company_name="Acme", website="https://acme.com")]

        result = check_duplicate("Ac", "https://ac.io", existing, min_name_length=2)

        assert result.is_duplicate is True

    def test_empty_directory(self):
        assert check_duplicate("Acme", "https://acme.com", []).is_duplicate is False

    def test_single_record_examples(self):
        existing = [Startup(id="1", company_name="Acme", website="https://acme.com")]

        assert check_duplicate("acme", "https://other.com", existing).is_duplicate is True
        assert check_duplicate("Other", "https://ACME.COM", existing).is_duplicate is True
        assert check_duplicate("Beta", "https://beta.io", existing).is_duplicate is False
