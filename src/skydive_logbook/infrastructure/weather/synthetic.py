"""Synthetic weather used when no live observation is available."""

import random
from typing import Optional

from skydive_logbook.application.ports.weather import WeatherProvider
from skydive_logbook.domain.value_objects.weather import WeatherObservation, wind_direction_label

SYNTHETIC_CONDITIONS = ["Ensoleillé", "Partiellement nuageux", "Nuageux", "Venteux"]


class SyntheticWeatherProvider(WeatherProvider):
    """Produces random but well-formed observations."""

    SOURCE = "synthetic"

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    async def fetch_current_conditions(self, latitude: float, longitude: float) -> WeatherObservation:
        """Generate an observation; the coordinates are ignored."""
        return self.generate()

    def generate(self) -> WeatherObservation:
        rng = self._rng
        wind_speed = rng.randint(5, 34)
        direction = rng.randint(0, 359)
        visibility_km = rng.randint(5, 12)

        return WeatherObservation(
            temperature_celsius=rng.randint(5, 29),
            conditions_description=rng.choice(SYNTHETIC_CONDITIONS),
            visibility_km=float(visibility_km),
            visibility=f"{visibility_km} km",
            wind_speed_kmh=float(wind_speed),
            wind=f"{wind_speed} km/h {wind_direction_label(direction)}",
            pressure_hpa=rng.randint(1000, 1049),
            humidity_percent=rng.randint(40, 79),
            wind_direction_degrees=direction,
            source=self.SOURCE
        )
