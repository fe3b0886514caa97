"""Favourite drop zone endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.presentation.api.dependencies import get_drop_zone_service
from skydive_logbook.presentation.api.middleware.auth import get_current_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import ApiResponse, FavoriteListResponse

router = APIRouter()


@router.get("")
async def list_favorites(
    current_jumper: Jumper = Depends(get_current_jumper),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> FavoriteListResponse:
    """List the current jumper's favourite drop zone ids."""
    return FavoriteListResponse(favorites=await drop_zone_service.list_favorites(current_jumper.id))


@router.post("/{dropzone_id}", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    dropzone_id: str,
    current_jumper: Jumper = Depends(get_current_jumper),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> ApiResponse:
    """Add a drop zone to favourites."""
    if not drop_zone_service.get_drop_zone(dropzone_id):
        raise HTTPException(status_code=404, detail=f"Drop zone not found: {dropzone_id}")
    await drop_zone_service.add_favorite(current_jumper.id, dropzone_id)
    return ApiResponse(success=True, message="Added to favourites")


@router.delete("/{dropzone_id}")
async def remove_favorite(
    dropzone_id: str,
    current_jumper: Jumper = Depends(get_current_jumper),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> ApiResponse:
    """Remove a drop zone from favourites."""
    if not await drop_zone_service.remove_favorite(current_jumper.id, dropzone_id):
        raise HTTPException(status_code=404, detail=f"Drop zone is not a favourite: {dropzone_id}")
    return ApiResponse(success=True, message="Removed from favourites")
