"""OpenWeatherMap current-conditions provider."""

from typing import Any, Dict, Optional

import httpx

from skydive_logbook.application.ports.weather import WeatherProvider, WeatherProviderError
from skydive_logbook.domain.value_objects.weather import WeatherObservation, round_half_up, wind_direction_label
from skydive_logbook.infrastructure.logging import get_logger, log_weather_fetch

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"

logger = get_logger(__name__)


class OpenWeatherMapProvider(WeatherProvider):
    """Fetches current conditions from the OpenWeatherMap /weather endpoint.

    Requests metric units and French descriptions so the condition text
    matches the hazard vocabulary used by the safety evaluator.
    """

    SOURCE = "openweathermap"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        if not api_key:
            raise ValueError("OpenWeatherMap API key is required")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def fetch_current_conditions(self, latitude: float, longitude: float) -> WeatherObservation:
        """Fetch and map current conditions.

        Raises:
            WeatherProviderError: On transport errors, non-2xx responses or malformed payloads
        """
        try:
            response = await self._client.get(
                f"{self._base_url}/weather",
                params={
                    "lat": latitude,
                    "lon": longitude,
                    "appid": self._api_key,
                    "units": "metric",
                    "lang": "fr",
                },
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise WeatherProviderError(
                f"OpenWeatherMap returned {e.response.status_code} for ({latitude}, {longitude})"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise WeatherProviderError(f"OpenWeatherMap request failed: {e}") from e

        observation = self.parse_payload(payload)
        log_weather_fetch(logger, latitude, longitude, self.SOURCE)
        return observation

    @classmethod
    def parse_payload(cls, payload: Dict[str, Any]) -> WeatherObservation:
        """Map an OpenWeatherMap response body to an observation.

        Raises:
            WeatherProviderError: If required fields are missing
        """
        try:
            main = payload["main"]
            wind = payload.get("wind", {})
            description = payload["weather"][0]["description"]
            temperature = round_half_up(main["temp"])
        except (KeyError, IndexError, TypeError) as e:
            raise WeatherProviderError(f"Malformed OpenWeatherMap payload: missing {e}") from e

        wind_speed_kmh = wind["speed"] * 3.6 if wind.get("speed") is not None else None
        wind_degrees = wind.get("deg")
        visibility_m = payload.get("visibility")

        wind_text = ""
        if wind_speed_kmh is not None:
            wind_text = f"{round_half_up(wind_speed_kmh)} km/h"
            if wind_degrees is not None:
                wind_text += f" {wind_direction_label(wind_degrees)}"

        return WeatherObservation.from_display(
            temperature_celsius=temperature,
            conditions_description=description[:1].upper() + description[1:],
            visibility=f"{round_half_up(visibility_m / 1000)} km" if visibility_m else "N/A",
            wind_speed_kmh=wind_speed_kmh,
            wind=wind_text,
            pressure_hpa=main.get("pressure"),
            humidity_percent=main.get("humidity"),
            wind_direction_degrees=wind_degrees,
            source=cls.SOURCE
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
