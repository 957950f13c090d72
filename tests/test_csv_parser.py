# =============================================================================
# tests/test_csv_parser.py - Startup CSV Parsing Tests
# =============================================================================
# Tests for the legacy line splitter, header mapping, record building and
# the pandas-backed rfc4180 mode.
#
# Run with: pytest tests/test_csv_parser.py -v
# =============================================================================

import pytest

from core.models.startup import StartupStatus
from core.services.csv_parser import parse_header, parse_startup_csv, split_legacy_row
from lib.utils import CsvParseError


# =============================================================================
# Legacy Splitter Tests
# =============================================================================

class TestSplitLegacyRow:
    """Tests for the quote-aware line splitter."""

    def test_plain_fields(self):
        assert split_legacy_row("Acme,https://acme.com,B2B") == ["Acme", "https://acme.com", "B2B"]

    def test_comma_inside_quotes(self):
        assert split_legacy_row('Acme,"Fintech, AI",B2B') == ["Acme", "Fintech, AI", "B2B"]

    def test_escaped_quote_is_kept_verbatim(self):
        """A backslash-escaped quote does not close the field."""
        values = split_legacy_row('a,"say \\"hi\\", ok",b')

        assert values == ["a", 'say \\"hi\\", ok', "b"]

    def test_escaped_quote_outside_quotes(self):
        """An escaped quote does not open a quoted section either."""
        assert split_legacy_row('x,\\"a,b') == ["x", '\\"a', "b"]

    def test_trailing_comma_gives_empty_field(self):
        assert split_legacy_row("a,") == ["a", ""]

    def test_values_are_trimmed(self):
        assert split_legacy_row("  Acme ,  B2B  ") == ["Acme", "B2B"]

    def test_carriage_return_is_trimmed(self):
        assert split_legacy_row("Acme,https://acme.com\r") == ["Acme", "https://acme.com"]


class TestParseHeader:
    """Tests for the header name -> index map."""

    def test_quotes_are_stripped(self):
        columns = parse_header('"Company Name", "Website"')

        assert columns == {"Company Name": 0, "Website": 1}

    def test_first_duplicate_header_wins(self):
        columns = parse_header("Company Name,Website,Company Name")

        assert columns["Company Name"] == 0


# =============================================================================
# Legacy Parser Tests
# =============================================================================

class TestParseLegacy:
    """Tests for parse_startup_csv in legacy mode."""

    def test_ids_are_row_ordinals(self, sample_csv):
        """Blank lines are skipped but still use up an ordinal."""
        startups = parse_startup_csv(sample_csv)

        assert [s.id for s in startups] == ["1", "2", "3", "5"]

    def test_records_are_active(self, sample_startups):
        assert all(s.status == StartupStatus.ACTIVE for s in sample_startups)

    def test_fields_are_mapped_by_header(self, sample_startups):
        acme = sample_startups[0]

        assert acme.company_name == "Acme"
        assert acme.website == "https://acme.com"
        assert acme.logo == "https://acme.com/logo.png"
        assert acme.team_size == "11-50"
        assert acme.business_model_type == "B2B, SaaS"
        assert acme.industries == "Fintech, AI"
        assert acme.legal_name == "Acme Co. Ltd."
        assert acme.email == "hi@acme.com"
        assert acme.social_media == "https://x.com/acme"

    def test_empty_cells_are_none(self, sample_startups):
        beta = sample_startups[1]

        assert beta.logo is None
        assert beta.legal_name is None
        assert beta.team_members == []

    def test_team_members(self, sample_startups):
        acme, _, gamma, _ = sample_startups

        assert len(acme.team_members) == 1
        assert acme.team_members[0].name == "Jane Doe"
        assert acme.team_members[0].position == "CEO"
        assert acme.team_members[0].email == "jane@acme.com"

        # Only the second slot is filled
        assert len(gamma.team_members) == 1
        assert gamma.team_members[0].name == "Tom Lee"

    def test_column_order_does_not_matter(self):
        text = "Website,Industries,Company Name\nhttps://acme.com,AI,Acme"

        startup = parse_startup_csv(text)[0]

        assert startup.company_name == "Acme"
        assert startup.website == "https://acme.com"
        assert startup.industries == "AI"

    def test_short_row_leaves_attributes_unset(self):
        startup = parse_startup_csv("Company Name,Website,Industries\nSolo")[0]

        assert startup.company_name == "Solo"
        assert startup.website == ""
        assert startup.industries is None

    def test_absent_header_is_none_everywhere(self, sample_csv):
        text = sample_csv.replace("Industries", "Sectors", 1)

        startups = parse_startup_csv(text)

        assert all(s.industries is None for s in startups)

    def test_missing_company_name_header(self):
        startup = parse_startup_csv("Website,Industries\nhttps://x.io,AI")[0]

        assert startup.company_name == ""
        assert startup.website == "https://x.io"

    def test_crlf_line_endings(self):
        text = "Company Name,Website\r\nAcme,https://acme.com\r\n"

        startups = parse_startup_csv(text)

        assert len(startups) == 1
        assert startups[0].website == "https://acme.com"

    def test_header_only(self):
        assert parse_startup_csv("Company Name,Website\n") == []

    def test_empty_text_raises(self):
        with pytest.raises(CsvParseError) as exc_info:
            parse_startup_csv("")

        assert exc_info.value.code == "CSV_PARSE_FAILED"


# =============================================================================
# RFC 4180 Parser Tests
# =============================================================================

class TestParseRfc4180:
    """Tests for parse_startup_csv in rfc4180 mode."""

    def test_sample_csv(self, sample_csv):
        startups = parse_startup_csv(sample_csv, mode="rfc4180")

        assert [s.company_name for s in startups] == ["Acme", "Beta Health", "Gamma Pay", "Delta Farm"]
        assert startups[0].industries == "Fintech, AI"
        assert startups[1].logo is None

    def test_doubled_quotes(self):
        text = 'Company Name,Website,Industries\nAcme,https://acme.com,"Fintech, ""AI"""\n'

        startup = parse_startup_csv(text, mode="rfc4180")[0]

        assert startup.industries == 'Fintech, "AI"'

    def test_quoted_newline(self):
        text = 'Company Name,Website,Legal Name\nAcme,https://acme.com,"Acme\nHoldings"\n'

        startups = parse_startup_csv(text, mode="rfc4180")

        assert len(startups) == 1
        assert startups[0].legal_name == "Acme\nHoldings"

    def test_empty_text_raises(self):
        with pytest.raises(CsvParseError):
            parse_startup_csv("", mode="rfc4180")

    def test_trailing_comma_keeps_columns_aligned(self):
        text = "Company Name,Website\nAcme,https://acme.com,\nBeta,https://beta.io,\n"

        startups = parse_startup_csv(text, mode="rfc4180")

        assert [(s.company_name, s.website) for s in startups] == [
            ("Acme", "https://acme.com"),
            ("Beta", "https://beta.io"),
        ]
