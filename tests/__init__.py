# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Startup Directory API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_csv_parser.py / test_csv_loader.py: CSV ingestion
# - test_startup_cache.py: Cache load states
# - test_directory_service.py / test_duplicate_service.py: Read side and guard
# - test_custom_fields.py / test_registration_service.py: Write side
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
