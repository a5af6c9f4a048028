"""Saved connection API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from connhub.dependencies import get_saved_profile_service
from connhub.models.connection_types import CONNECTION_TYPES
from connhub.schemas.response_schema import ERROR_RESPONSES, ApiResponse, success_response
from connhub.schemas.saved_profile_schema import (
    ConnectionTypeResponse,
    ImportUrlRequest,
    SavedProfileCreate,
    SavedProfileResponse,
    SavedProfileSecretsResponse,
    SavedProfileUpdate,
)
from connhub.services.saved_profile_service import SavedProfileService

router = APIRouter(
    prefix="/api/v1/connections",
    tags=["connections"],
    responses=ERROR_RESPONSES,
)

SavedProfileServiceDep = Annotated[
    SavedProfileService, Depends(get_saved_profile_service)
]


@router.get("/types", response_model=ApiResponse[list[ConnectionTypeResponse]])
async def list_connection_types() -> dict:
    """List the supported connection types."""
    types = [ConnectionTypeResponse.model_validate(t) for t in CONNECTION_TYPES]
    return success_response(types)


@router.get("", response_model=ApiResponse[list[SavedProfileResponse]])
async def list_connections(service: SavedProfileServiceDep) -> dict:
    """List saved connections."""
    return success_response(await service.list_profiles())


@router.post(
    "",
    response_model=ApiResponse[SavedProfileResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_connection(
    request: SavedProfileCreate, service: SavedProfileServiceDep
) -> dict:
    """Create a saved connection."""
    profile = await service.create_profile(request)
    return success_response(profile, status=201, message="Connection saved")


@router.post(
    "/import",
    response_model=ApiResponse[SavedProfileResponse],
    status_code=status.HTTP_201_CREATED,
)
async def import_connection(
    request: ImportUrlRequest, service: SavedProfileServiceDep
) -> dict:
    """Create a saved connection from a connection URL."""
    profile = await service.import_url(request)
    return success_response(profile, status=201, message="Connection imported")


@router.get("/{connection_id}", response_model=ApiResponse[SavedProfileResponse])
async def get_connection(connection_id: int, service: SavedProfileServiceDep) -> dict:
    return success_response(await service.get_profile(connection_id))


@router.patch("/{connection_id}", response_model=ApiResponse[SavedProfileResponse])
async def update_connection(
    connection_id: int,
    request: SavedProfileUpdate,
    service: SavedProfileServiceDep,
) -> dict:
    """Update fields of a saved connection."""
    profile = await service.update_profile(connection_id, request)
    return success_response(profile, message="Connection updated")


@router.delete("/{connection_id}", response_model=ApiResponse[None])
async def delete_connection(
    connection_id: int, service: SavedProfileServiceDep
) -> dict:
    await service.delete_profile(connection_id)
    return success_response(None, message="Connection deleted")


@router.get(
    "/{connection_id}/secrets",
    response_model=ApiResponse[SavedProfileSecretsResponse],
)
async def get_connection_secrets(
    connection_id: int, service: SavedProfileServiceDep
) -> dict:
    """Return the decrypted secrets of a saved connection."""
    return success_response(await service.reveal_secrets(connection_id))
