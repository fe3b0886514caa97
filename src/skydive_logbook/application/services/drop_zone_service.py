"""Drop zone directory, favourites and weather refresh use cases."""

import asyncio
import logging
from typing import Iterable, List, Optional, Set, Tuple, TYPE_CHECKING
from uuid import UUID

from skydive_logbook.domain.entities.drop_zone import DropZone, DropZoneConditions, DropZoneStatus
from skydive_logbook.domain.value_objects.weather import WeatherObservation
from skydive_logbook.domain.value_objects.safety import (
    DEFAULT_THRESHOLDS,
    SafetyLevel,
    SafetyThresholds,
    categorize,
    compute_safety_score
)
from skydive_logbook.infrastructure.logging import get_logger, log_with_extra

if TYPE_CHECKING:
    from skydive_logbook.application.ports.repositories import DropZoneDirectory, FavoriteRepository
    from skydive_logbook.application.ports.weather import WeatherProvider


class DropZoneService:
    """Application service for browsing drop zones with current conditions."""

    def __init__(
        self,
        directory: "DropZoneDirectory",
        weather_provider: "WeatherProvider",
        favorite_repository: "FavoriteRepository",
        thresholds: SafetyThresholds = DEFAULT_THRESHOLDS
    ):
        self._directory = directory
        self._weather_provider = weather_provider
        self._favorite_repository = favorite_repository
        self._thresholds = thresholds
        self._logger = get_logger(__name__)

    def list_drop_zones(
        self,
        search: Optional[str] = None,
        status: Optional[DropZoneStatus] = None,
        region: Optional[str] = None
    ) -> List[DropZone]:
        """List drop zones matching the given filters, in catalogue order."""
        return [
            drop_zone for drop_zone in self._directory.find_all()
            if drop_zone.matches(search)
            and (status is None or drop_zone.status == status)
            and (not region or drop_zone.region == region)
        ]

    def get_drop_zone(self, dropzone_id: str) -> Optional[DropZone]:
        """Get a drop zone by id."""
        return self._directory.find_by_id(dropzone_id)

    def regions(self) -> List[str]:
        """Distinct regions, sorted."""
        return sorted({drop_zone.region for drop_zone in self._directory.find_all()})

    async def assess_location(
        self,
        latitude: float,
        longitude: float
    ) -> Tuple[WeatherObservation, float, SafetyLevel]:
        """Fetch current weather at a point and score it."""
        observation = await self._weather_provider.fetch_current_conditions(latitude, longitude)
        score = compute_safety_score(observation, self._thresholds)
        return observation, score, categorize(score)

    async def get_conditions(
        self,
        drop_zone: DropZone,
        favorites: Optional[Set[str]] = None
    ) -> DropZoneConditions:
        """Fetch current weather for one drop zone and evaluate jump safety."""
        observation, score, level = await self.assess_location(drop_zone.latitude, drop_zone.longitude)
        return DropZoneConditions(
            drop_zone=drop_zone,
            observation=observation,
            safety_level=level,
            safety_score=score,
            is_favorite=drop_zone.id in (favorites or set())
        )

    async def refresh_weather(
        self,
        drop_zones: Iterable[DropZone],
        user_id: Optional[UUID] = None
    ) -> List[DropZoneConditions]:
        """Fetch conditions for every drop zone concurrently.

        Results are returned in the order of the input.
        """
        drop_zones = list(drop_zones)
        favorites = set(await self.list_favorites(user_id)) if user_id else set()

        results = await asyncio.gather(
            *(self.get_conditions(drop_zone, favorites) for drop_zone in drop_zones)
        )

        log_with_extra(
            self._logger,
            logging.INFO,
            f"Refreshed weather for {len(results)} drop zones",
            dropzone_count=len(results),
            dangerous_count=sum(1 for result in results if result.safety_level == SafetyLevel.DANGEROUS)
        )
        return list(results)

    async def list_favorites(self, user_id: UUID) -> List[str]:
        """List favourite drop zone ids."""
        return await self._favorite_repository.list_ids(user_id)

    async def add_favorite(self, user_id: UUID, dropzone_id: str) -> None:
        """Add a drop zone to favourites.

        Raises:
            ValueError: If the drop zone does not exist
        """
        if not self._directory.find_by_id(dropzone_id):
            raise ValueError(f"Drop zone not found: {dropzone_id}")
        await self._favorite_repository.add(user_id, dropzone_id)

    async def remove_favorite(self, user_id: UUID, dropzone_id: str) -> bool:
        """Remove a drop zone from favourites."""
        return await self._favorite_repository.remove(user_id, dropzone_id)
