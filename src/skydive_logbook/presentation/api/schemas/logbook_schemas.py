"""Pydantic schemas for logbook API requests and responses."""

from datetime import datetime, date as Date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from skydive_logbook.application.services.jump_service import JumpDetails
from skydive_logbook.application.services.scan_service import ScannedJump, ScanResult
from skydive_logbook.domain.entities.drop_zone import DropZone, DropZoneConditions
from skydive_logbook.domain.entities.jump import Jump
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.domain.value_objects.jump_statistics import JumpStatistics
from skydive_logbook.domain.value_objects.safety import SafetyLevel
from skydive_logbook.domain.value_objects.weather import WeatherObservation
from skydive_logbook.presentation.api.display import STATUS_MARKER_COLORS, safety_display


class SignupRequest(BaseModel):
    """Request model for account creation."""
    email: str = Field(..., description="Contact email")
    password: str = Field(..., description="At least 8 characters")
    name: str = Field(..., description="Display name")
    license_number: str = Field(..., description="Federation licence number, used to sign in")


class SigninRequest(BaseModel):
    """Login request model."""
    license_number: str
    password: str


class LoginResponse(BaseModel):
    """Login response model."""
    success: bool
    token: Optional[str] = None
    user_id: Optional[str] = None
    expires_at: Optional[datetime] = None
    error_message: Optional[str] = None
    locked_until: Optional[datetime] = None
    failed_attempts: int = 0


class ChangePasswordRequest(BaseModel):
    """Change password request model."""
    old_password: str
    new_password: str


class ApiResponse(BaseModel):
    """Generic API response model."""
    success: bool
    message: str


class JumpStatisticsResponse(BaseModel):
    total_jumps: int
    total_altitude: int
    total_altitude_km: float
    total_freefall: str = Field(..., description="Formatted as 'Xm Ys'")
    total_freefall_seconds: int
    favorite_dropzone: str
    distinct_dropzones: int
    last_jump_location: Optional[str] = None

    @classmethod
    def from_statistics(cls, statistics: JumpStatistics) -> "JumpStatisticsResponse":
        return cls(
            total_jumps=statistics.total_jumps,
            total_altitude=statistics.total_altitude,
            total_altitude_km=statistics.total_altitude_km,
            total_freefall=statistics.total_freefall,
            total_freefall_seconds=statistics.total_freefall_seconds,
            favorite_dropzone=statistics.favorite_dropzone,
            distinct_dropzones=statistics.distinct_dropzones,
            last_jump_location=statistics.last_jump_location
        )


class JumperProfileResponse(BaseModel):
    """Jumper profile response model."""
    id: str
    email: str
    name: str
    license_number: str
    join_date: datetime
    last_login: Optional[datetime] = None
    total_jumps: int
    statistics: JumpStatisticsResponse

    @classmethod
    def from_jumper(cls, jumper: Jumper, statistics: JumpStatistics) -> "JumperProfileResponse":
        return cls(
            id=str(jumper.id),
            email=jumper.email,
            name=jumper.name,
            license_number=jumper.license_number,
            join_date=jumper.join_date,
            last_login=jumper.last_login,
            total_jumps=statistics.total_jumps,
            statistics=JumpStatisticsResponse.from_statistics(statistics)
        )


class JumpRequest(BaseModel):
    """Request model for logging a jump."""
    date: Date
    location: str = Field(..., min_length=1)
    aircraft: str = Field(..., min_length=1)
    altitude: int = Field(..., gt=0, description="Exit altitude in metres")
    canopy_size: Optional[int] = Field(None, gt=0, description="Canopy size in square feet")
    weather: Optional[str] = None
    wind: Optional[str] = None
    freefall_notes: Optional[str] = None
    canopy_notes: Optional[str] = None

    @field_validator('location', 'aircraft')
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Field cannot be blank')
        return v.strip()

    def to_details(self) -> JumpDetails:
        return JumpDetails(
            jump_date=self.date,
            location=self.location,
            aircraft=self.aircraft,
            altitude=self.altitude,
            canopy_size=self.canopy_size,
            weather=self.weather,
            wind=self.wind,
            freefall_notes=self.freefall_notes,
            canopy_notes=self.canopy_notes
        )


class JumpResponse(BaseModel):
    """Response model for a logbook entry."""
    id: UUID
    jump_number: int
    date: Date
    location: str
    aircraft: str
    altitude: int
    canopy_size: Optional[int] = None
    weather: Optional[str] = None
    wind: Optional[str] = None
    freefall_notes: Optional[str] = None
    canopy_notes: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, jump: Jump) -> "JumpResponse":
        return cls(
            id=jump.id,
            jump_number=jump.jump_number,
            date=jump.date,
            location=jump.location,
            aircraft=jump.aircraft,
            altitude=jump.altitude,
            canopy_size=jump.canopy_size,
            weather=jump.weather,
            wind=jump.wind,
            freefall_notes=jump.freefall_notes,
            canopy_notes=jump.canopy_notes,
            created_at=jump.created_at
        )


class JumpListResponse(BaseModel):
    jumps: List[JumpResponse]
    total: int


class WeatherResponse(BaseModel):
    """Current conditions at a location."""
    temperature: float
    conditions: str
    wind: str
    wind_speed_kmh: Optional[float] = None
    wind_direction: Optional[float] = None
    visibility: str
    visibility_km: float
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    source: str
    observed_at: datetime

    @classmethod
    def from_observation(cls, observation: WeatherObservation) -> "WeatherResponse":
        return cls(
            temperature=observation.temperature_celsius,
            conditions=observation.conditions_description,
            wind=observation.wind,
            wind_speed_kmh=observation.wind_speed_kmh,
            wind_direction=observation.wind_direction_degrees,
            visibility=observation.visibility,
            visibility_km=observation.visibility_km,
            pressure=observation.pressure_hpa,
            humidity=observation.humidity_percent,
            source=observation.source,
            observed_at=observation.observed_at
        )


class SafetyResponse(BaseModel):
    """Advisory jump safety rating."""
    level: str
    score: float
    label: str
    color_class: str
    icon: str
    advisory: Optional[str] = None

    @classmethod
    def from_level(cls, level: SafetyLevel, score: float) -> "SafetyResponse":
        display = safety_display(level)
        return cls(
            level=level.value,
            score=score,
            label=display.label,
            color_class=display.color_class,
            icon=display.icon,
            advisory=display.advisory
        )


class LocationWeatherResponse(BaseModel):
    latitude: float
    longitude: float
    weather: WeatherResponse
    safety: SafetyResponse


class DropZoneResponse(BaseModel):
    """Drop zone with current weather and safety rating."""
    id: str
    name: str
    city: str
    region: str
    latitude: float
    longitude: float
    phone: str
    website: str
    aircraft: List[str]
    max_altitude: int
    status: str
    marker_color: str
    directions_url: str
    is_favorite: bool = False
    weather: Optional[WeatherResponse] = None
    safety: Optional[SafetyResponse] = None

    @classmethod
    def from_drop_zone(cls, drop_zone: DropZone, **extra) -> "DropZoneResponse":
        return cls(
            id=drop_zone.id,
            name=drop_zone.name,
            city=drop_zone.city,
            region=drop_zone.region,
            latitude=drop_zone.latitude,
            longitude=drop_zone.longitude,
            phone=drop_zone.phone,
            website=drop_zone.website,
            aircraft=list(drop_zone.aircraft),
            max_altitude=drop_zone.max_altitude,
            status=drop_zone.status.value,
            marker_color=STATUS_MARKER_COLORS[drop_zone.status],
            directions_url=drop_zone.directions_url,
            **extra
        )

    @classmethod
    def from_conditions(cls, conditions: DropZoneConditions) -> "DropZoneResponse":
        return cls.from_drop_zone(
            conditions.drop_zone,
            is_favorite=conditions.is_favorite,
            weather=WeatherResponse.from_observation(conditions.observation),
            safety=SafetyResponse.from_level(conditions.safety_level, conditions.safety_score)
        )


class DropZoneListResponse(BaseModel):
    dropzones: List[DropZoneResponse]
    total: int


class RegionListResponse(BaseModel):
    regions: List[str]


class FavoriteListResponse(BaseModel):
    favorites: List[str]


class ScannedJumpResponse(BaseModel):
    id: UUID
    date: Date
    location: str
    aircraft: str
    altitude: int
    canopy_size: Optional[int] = None
    weather: Optional[str] = None
    wind: Optional[str] = None
    freefall_notes: Optional[str] = None
    canopy_notes: Optional[str] = None
    confidence: float

    @classmethod
    def from_scanned(cls, scanned: ScannedJump) -> "ScannedJumpResponse":
        return cls(
            id=scanned.id,
            date=scanned.jump_date,
            location=scanned.location,
            aircraft=scanned.aircraft,
            altitude=scanned.altitude,
            canopy_size=scanned.canopy_size,
            weather=scanned.weather,
            wind=scanned.wind,
            freefall_notes=scanned.freefall_notes,
            canopy_notes=scanned.canopy_notes,
            confidence=scanned.confidence
        )


class ScanResponse(BaseModel):
    success: bool
    image_name: str
    scanned_jumps: List[ScannedJumpResponse]

    @classmethod
    def from_result(cls, result: ScanResult) -> "ScanResponse":
        return cls(
            success=True,
            image_name=result.image_name,
            scanned_jumps=[ScannedJumpResponse.from_scanned(scanned) for scanned in result.scanned_jumps]
        )
