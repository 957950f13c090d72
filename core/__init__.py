# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the directory's business logic:
# - models/: Pydantic schemas for startups and custom fields
# - services/: CSV ingestion, the startup cache, queries, duplicate
#   detection, custom fields and registration/admin actions
# =============================================================================
