# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The DirectoryContext lives on app.state (set up in main.create_app), so
# there is no module-level mutable state and tests can hand in their own.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.context import DirectoryContext
from core.services.directory_service import DirectoryService
from core.services.registration_service import RegistrationService


def get_context(request: Request) -> DirectoryContext:
    """Get the directory context of the running app."""
    return request.app.state.context


def get_directory_service(
    context: Annotated[DirectoryContext, Depends(get_context)],
) -> DirectoryService:
    return DirectoryService(context)


def get_registration_service(
    context: Annotated[DirectoryContext, Depends(get_context)],
) -> RegistrationService:
    return RegistrationService(context)


# Type aliases for dependency injection
ContextDep = Annotated[DirectoryContext, Depends(get_context)]
DirectoryDep = Annotated[DirectoryService, Depends(get_directory_service)]
RegistrationDep = Annotated[RegistrationService, Depends(get_registration_service)]
