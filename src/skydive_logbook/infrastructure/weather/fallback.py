"""Provider that substitutes a fallback observation when the primary fails."""

from skydive_logbook.application.ports.weather import WeatherProvider
from skydive_logbook.domain.value_objects.weather import WeatherObservation
from skydive_logbook.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FallbackWeatherProvider(WeatherProvider):
    """Asks the primary provider first and the fallback on any failure."""

    def __init__(self, primary: WeatherProvider, fallback: WeatherProvider):
        self._primary = primary
        self._fallback = fallback

    async def fetch_current_conditions(self, latitude: float, longitude: float) -> WeatherObservation:
        try:
            return await self._primary.fetch_current_conditions(latitude, longitude)
        except Exception as e:
            logger.warning(
                f"Weather provider failed for ({latitude}, {longitude}), using fallback: {e}",
                extra={"weather_latitude": latitude, "weather_longitude": longitude, "error_type": type(e).__name__}
            )
            return await self._fallback.fetch_current_conditions(latitude, longitude)

    async def close(self) -> None:
        await self._primary.close()
        await self._fallback.close()
