# =============================================================================
# app/routers/custom_fields.py - Custom Field Management
# =============================================================================
# Admin surface for the extra fields collected at registration:
# - GET    /custom-fields        list in insertion order
# - POST   /custom-fields        create (type-tagged payload)
# - DELETE /custom-fields/{id}   delete
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, status
from pydantic import BaseModel, RootModel

from app.dependencies import ContextDep
from core.models.custom_field import CustomField, CustomFieldCreate

router = APIRouter()


class CustomFieldRequest(RootModel[CustomFieldCreate]):
    """Creation payload; the `type` tag selects the variant."""


class CustomFieldResponse(BaseModel):
    """Result of creating or deleting a field."""
    success: bool = True
    field: CustomField


@router.get("", response_model=list[CustomField])
async def list_custom_fields(context: ContextDep):
    """All custom field definitions, oldest first."""
    return context.custom_fields.list_fields()


@router.post(
    "",
    response_model=CustomFieldResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_custom_field(payload: CustomFieldRequest, context: ContextDep):
    """
    Create a custom field.

    The `type` tag selects the variant; only `select` fields take
    `options`.
    """
    field = context.custom_fields.create(payload.root)
    return CustomFieldResponse(field=field)


@router.delete("/{field_id}", response_model=CustomFieldResponse)
async def delete_custom_field(
    field_id: Annotated[str, Path(description="Custom field id")],
    context: ContextDep,
):
    """Delete a custom field. Values already stored on startups are kept."""
    field = context.custom_fields.delete(field_id)
    return CustomFieldResponse(field=field)
