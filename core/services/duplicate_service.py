# =============================================================================
# core/services/duplicate_service.py - Registration Duplicate Guard
# =============================================================================
# Decides whether a new registration looks like a startup that is already
# listed. Checks run in order and the first hit wins:
#
#   1. exact name match (case-insensitive)
#   2. exact website match (case-insensitive)
#   3. similar name: one name contains the other (case-insensitive)
#
# Step 3 only compares names of at least `min_name_length` characters, on
# both sides; otherwise a one-letter name would match nearly everything.
# =============================================================================

from core.models.startup import DuplicateCheckResult, Startup

DEFAULT_MIN_NAME_LENGTH = 3

SIMILAR_NAME_MESSAGE = (
    "We found similar startup names in our directory. "
    "Please check if your startup is already registered."
)
UNIQUE_MESSAGE = "Your startup appears to be unique in our directory."


def check_duplicate(
    name: str,
    website: str,
    existing: list[Startup],
    min_name_length: int = DEFAULT_MIN_NAME_LENGTH,
) -> DuplicateCheckResult:
    """
    Check a candidate name/website against existing startups.

    Args:
        name: Candidate company name
        website: Candidate website
        existing: Startups to compare against (active and pending)
        min_name_length: Shortest name the similar-name check applies to

    Returns:
        DuplicateCheckResult with a user-facing message

    Example:
        check_duplicate("acme", "https://other.com", [acme])
        # is_duplicate=True, name collision
    """
    name_key = name.strip().lower()
    website_key = website.strip().lower()

    if name_key and any(s.company_name.strip().lower() == name_key for s in existing):
        return DuplicateCheckResult(
            is_duplicate=True,
            message=f'A startup with the name "{name}" already exists in our directory.',
        )

    if website_key and any(s.website.strip().lower() == website_key for s in existing):
        return DuplicateCheckResult(
            is_duplicate=True,
            message=f'A startup with the website "{website}" already exists in our directory.',
        )

    if len(name_key) >= min_name_length:
        for startup in existing:
            other = startup.company_name.strip().lower()
            if len(other) >= min_name_length and (name_key in other or other in name_key):
                return DuplicateCheckResult(is_duplicate=True, message=SIMILAR_NAME_MESSAGE)

    return DuplicateCheckResult(is_duplicate=False, message=UNIQUE_MESSAGE)
