"""Port interface for current-conditions weather providers."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skydive_logbook.domain.value_objects.weather import WeatherObservation


class WeatherProviderError(RuntimeError):
    """Raised when a provider cannot produce an observation."""
    pass


class WeatherProvider(ABC):
    """Port interface for weather providers."""

    @abstractmethod
    async def fetch_current_conditions(self, latitude: float, longitude: float) -> "WeatherObservation":
        """Fetch current conditions at a coordinate."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release provider resources."""
        return None
