"""Drop zone entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..value_objects.safety import SafetyLevel
from ..value_objects.weather import WeatherObservation


class DropZoneStatus(Enum):
    """Operational status of a drop zone."""
    OPEN = "open"
    LIMITED = "limited"
    CLOSED = "closed"


@dataclass(frozen=True)
class DropZone:
    """A skydiving operating site from the static directory."""

    id: str
    name: str
    city: str
    region: str
    latitude: float
    longitude: float
    phone: str
    website: str
    aircraft: Tuple[str, ...]
    max_altitude: int
    status: DropZoneStatus = DropZoneStatus.OPEN

    def matches(self, search: Optional[str]) -> bool:
        """Case-insensitive search over name, city and region."""
        if not search:
            return True
        needle = search.strip().lower()
        return any(needle in value.lower() for value in (self.name, self.city, self.region))

    @property
    def directions_url(self) -> str:
        """Navigation link to the drop zone coordinates."""
        return f"https://www.google.com/maps/dir/?api=1&destination={self.latitude},{self.longitude}"


@dataclass(frozen=True)
class DropZoneConditions:
    """A drop zone with its current weather and derived safety level.

    Built on every read and never persisted.
    """

    drop_zone: DropZone
    observation: WeatherObservation
    safety_level: SafetyLevel
    safety_score: float
    is_favorite: bool = field(default=False)
