# =============================================================================
# core/services/csv_parser.py - Startup CSV Parsing
# =============================================================================
# Turns the raw text of the startup CSV into Startup records.
#
# Two parser modes are available (settings.CSV_PARSER_MODE):
# - legacy:  line-based splitter matching the directory export format.
#            A double quote toggles quoting unless it is preceded by a
#            backslash; an escaped quote is kept verbatim (backslash included).
#            Quoted fields cannot span lines.
# - rfc4180: pandas.read_csv with standard doubled-quote escaping.
#
# Columns are looked up by header name, so column order does not matter.
# Missing headers or short rows leave attributes unset (None); company name
# and website fall back to "".
# =============================================================================

import io
import logging
import re
from datetime import datetime
from typing import Callable, Literal

import pandas as pd

from core.models.startup import Startup, StartupStatus, TeamMember, utc_now
from lib.utils import CsvParseError

logger = logging.getLogger(__name__)

ParserMode = Literal["legacy", "rfc4180"]

# -----------------------------------------------------------------------------
# Header names in the source CSV
# -----------------------------------------------------------------------------

COMPANY_NAME = "Company Name"
WEBSITE = "Website"

# Startup attribute -> CSV header
OPTIONAL_COLUMNS = {
    "logo": "Logo",
    "team_size": "Team Size",
    "business_model_type": "Business Model Type",
    "founded_date": "Founded Date",
    "industries": "Industries",
    "legal_name": "Legal Name",
    "email": "Email",
    "phone_number": "Phone Number",
    "social_media": "Social Media",
}

# (name, position, email) headers per team member slot
TEAM_MEMBER_COLUMNS = [
    ("User 1 Name", "User 1 Position", "User 1 Email"),
    ("User 2 Name", "User 2 Position", "User 2 Email"),
]

_EDGE_QUOTES = re.compile(r'^"|"$')

# Lookup from header name to the raw cell value of one row
CellLookup = Callable[[str], str | None]


# =============================================================================
# Legacy Splitter
# =============================================================================

def _clean_cell(value: str) -> str:
    return _EDGE_QUOTES.sub("", value.strip())


def parse_header(line: str) -> dict[str, int]:
    """
    Build the header name -> column index map.

    Cells are comma-split, trimmed and stripped of every double quote.
    When a header name repeats, the first column wins.
    """
    columns: dict[str, int] = {}
    for index, cell in enumerate(line.split(",")):
        columns.setdefault(cell.strip().replace('"', ""), index)
    return columns


def split_legacy_row(line: str) -> list[str]:
    """
    Split one CSV line into field values.

    A comma inside an open quote is part of the value. A quote preceded by
    a backslash does not toggle quoting and is kept, with its backslash.

    Example:
        split_legacy_row('Acme,"Seed, Series A",B2B')
        # ["Acme", "Seed, Series A", "B2B"]
    """
    values: list[str] = []
    in_quotes = False
    current: list[str] = []

    for position, char in enumerate(line):
        if char == '"' and (position == 0 or line[position - 1] != "\\"):
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append(_clean_cell("".join(current)))
            current = []
        else:
            current.append(char)

    values.append(_clean_cell("".join(current)))
    return values


# =============================================================================
# Record Mapping
# =============================================================================

def build_startup(lookup: CellLookup, startup_id: str, now: datetime | None = None) -> Startup:
    """
    Map one parsed row onto a Startup.

    Empty cells count as unset. Nothing is validated: a row without a
    name or website still produces a record.
    """
    now = now or utc_now()

    team_members = []
    for name_column, position_column, email_column in TEAM_MEMBER_COLUMNS:
        member = TeamMember(
            name=lookup(name_column),
            position=lookup(position_column),
            email=lookup(email_column),
        )
        if not member.is_empty():
            team_members.append(member)

    return Startup(
        id=startup_id,
        company_name=lookup(COMPANY_NAME) or "",
        website=lookup(WEBSITE) or "",
        team_members=team_members,
        status=StartupStatus.ACTIVE,
        created_at=now,
        updated_at=now,
        **{attribute: lookup(header) for attribute, header in OPTIONAL_COLUMNS.items()},
    )


def _row_lookup(columns: dict[str, int], values: list[str]) -> CellLookup:
    def lookup(header: str) -> str | None:
        index = columns.get(header)
        if index is None or index >= len(values):
            return None
        return values[index] or None

    return lookup


# =============================================================================
# Parsers
# =============================================================================

def _parse_legacy(text: str) -> list[Startup]:
    lines = text.split("\n")
    columns = parse_header(lines[0])
    if not any(columns):
        raise CsvParseError("missing header row")

    now = utc_now()
    startups = []
    for ordinal, line in enumerate(lines[1:], start=1):
        # Blank lines are skipped but still consume an ordinal
        if not line.strip():
            continue
        values = split_legacy_row(line)
        startups.append(build_startup(_row_lookup(columns, values), str(ordinal), now))

    return startups


def _parse_rfc4180(text: str) -> list[Startup]:
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError:
        raise CsvParseError("missing header row")
    except pd.errors.ParserError as e:
        raise CsvParseError(str(e))

    df.columns = [str(column).strip() for column in df.columns]
    columns = {column: index for index, column in enumerate(df.columns)}

    now = utc_now()
    startups = []
    for ordinal, row in enumerate(df.itertuples(index=False, name=None), start=1):
        values = ["" if pd.isna(value) else str(value).strip() for value in row]
        startups.append(build_startup(_row_lookup(columns, values), str(ordinal), now))

    return startups


def parse_startup_csv(text: str, mode: ParserMode = "legacy") -> list[Startup]:
    """
    Parse startup CSV text into records, in file order.

    Args:
        text: Raw CSV text (first line is the header)
        mode: "legacy" (backslash-aware splitter) or "rfc4180" (pandas)

    Returns:
        List of active Startup records with row-ordinal ids

    Raises:
        CsvParseError: If there is no usable header row
    """
    if mode == "rfc4180":
        startups = _parse_rfc4180(text)
    else:
        startups = _parse_legacy(text)

    logger.debug(f"Parsed {len(startups)} startups ({mode} mode)")
    return startups
