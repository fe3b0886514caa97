"""Drop zone directory endpoints with live weather and safety ratings."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.domain.entities.drop_zone import DropZoneStatus
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.presentation.api.dependencies import get_drop_zone_service
from skydive_logbook.presentation.api.middleware.auth import get_optional_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import (
    DropZoneListResponse,
    DropZoneResponse,
    RegionListResponse
)

router = APIRouter()


@router.get("")
async def list_drop_zones(
    search: Optional[str] = Query(None, description="Matches name, city or region"),
    status_filter: Optional[DropZoneStatus] = Query(None, alias="status"),
    region: Optional[str] = Query(None),
    current_jumper: Optional[Jumper] = Depends(get_optional_jumper),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> DropZoneListResponse:
    """List drop zones with current weather and safety rating."""
    drop_zones = drop_zone_service.list_drop_zones(search=search, status=status_filter, region=region)
    conditions = await drop_zone_service.refresh_weather(
        drop_zones,
        user_id=current_jumper.id if current_jumper else None
    )
    return DropZoneListResponse(
        dropzones=[DropZoneResponse.from_conditions(item) for item in conditions],
        total=len(conditions)
    )


@router.get("/regions")
async def list_regions(
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> RegionListResponse:
    """Distinct regions of the directory."""
    return RegionListResponse(regions=drop_zone_service.regions())


@router.get("/{dropzone_id}")
async def get_drop_zone(
    dropzone_id: str,
    current_jumper: Optional[Jumper] = Depends(get_optional_jumper),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> DropZoneResponse:
    """Get one drop zone with current weather and safety rating."""
    drop_zone = drop_zone_service.get_drop_zone(dropzone_id)
    if not drop_zone:
        raise HTTPException(status_code=404, detail=f"Drop zone not found: {dropzone_id}")

    favorites = set(await drop_zone_service.list_favorites(current_jumper.id)) if current_jumper else set()
    conditions = await drop_zone_service.get_conditions(drop_zone, favorites)
    return DropZoneResponse.from_conditions(conditions)
