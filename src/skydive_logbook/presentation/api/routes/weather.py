"""Point weather lookup."""

from fastapi import APIRouter, Depends, Query

from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.presentation.api.dependencies import get_drop_zone_service
from skydive_logbook.presentation.api.schemas.logbook_schemas import (
    LocationWeatherResponse,
    SafetyResponse,
    WeatherResponse
)

router = APIRouter()


@router.get("")
async def get_weather(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    drop_zone_service: DropZoneService = Depends(get_drop_zone_service)
) -> LocationWeatherResponse:
    """Current conditions and safety rating at a coordinate."""
    observation, score, level = await drop_zone_service.assess_location(lat, lon)
    return LocationWeatherResponse(
        latitude=lat,
        longitude=lon,
        weather=WeatherResponse.from_observation(observation),
        safety=SafetyResponse.from_level(level, score)
    )
