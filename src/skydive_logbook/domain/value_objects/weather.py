"""Weather observation value object."""

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


DEFAULT_VISIBILITY_KM = 10.0

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSO", "SO", "OSO", "O", "ONO", "NO", "NNO",
]

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_visibility_km(text: Optional[str]) -> float:
    """Parse the leading number of a visibility display string ("9 km", "10+ km").

    Returns DEFAULT_VISIBILITY_KM when no number can be read.
    """
    if not text:
        return DEFAULT_VISIBILITY_KM

    match = _LEADING_NUMBER.match(text)
    if not match:
        return DEFAULT_VISIBILITY_KM
    return float(match.group(1))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (20.5 -> 21, -20.5 -> -20)."""
    return math.floor(value + 0.5)


def wind_direction_label(degrees: float) -> str:
    """Map a bearing in degrees to a 16-point French compass label."""
    index = round_half_up(degrees / 22.5) % 16
    return COMPASS_POINTS[index]


@dataclass(frozen=True)
class WeatherObservation:
    """Immutable snapshot of current conditions at a location."""

    temperature_celsius: float
    conditions_description: str
    visibility_km: float = DEFAULT_VISIBILITY_KM
    wind_speed_kmh: Optional[float] = None
    wind: str = ""
    visibility: str = ""
    pressure_hpa: Optional[float] = None
    humidity_percent: Optional[float] = None
    wind_direction_degrees: Optional[float] = None
    source: str = "unknown"
    observed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_display(
        cls,
        temperature_celsius: float,
        conditions_description: str,
        visibility: str,
        wind_speed_kmh: Optional[float] = None,
        **kwargs
    ) -> "WeatherObservation":
        """Build an observation whose visibility comes from a display string."""
        return cls(
            temperature_celsius=temperature_celsius,
            conditions_description=conditions_description,
            visibility_km=parse_visibility_km(visibility),
            visibility=visibility,
            wind_speed_kmh=wind_speed_kmh,
            **kwargs
        )

    @property
    def effective_wind_speed_kmh(self) -> float:
        """Wind speed used for scoring; a missing reading counts as calm."""
        return self.wind_speed_kmh if self.wind_speed_kmh is not None else 0.0
