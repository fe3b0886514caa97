"""Unit tests for the drop zone service and weather refresh."""

import random

import pytest
from uuid import uuid4

from skydive_logbook.application.ports.weather import WeatherProvider, WeatherProviderError
from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.domain.entities.drop_zone import DropZone, DropZoneStatus
from skydive_logbook.domain.value_objects.safety import SafetyLevel
from skydive_logbook.domain.value_objects.weather import WeatherObservation
from skydive_logbook.infrastructure.repositories.kv_repositories import KeyValueFavoriteRepository
from skydive_logbook.infrastructure.repositories.memory_repositories import InMemoryKeyValueStore
from skydive_logbook.infrastructure.repositories.static_drop_zones import DROP_ZONES, StaticDropZoneDirectory
from skydive_logbook.infrastructure.weather.fallback import FallbackWeatherProvider
from skydive_logbook.infrastructure.weather.synthetic import SyntheticWeatherProvider

pytestmark = pytest.mark.asyncio


def drop_zone(dz_id, name, region="Occitanie", latitude=43.0, status=DropZoneStatus.OPEN):
    return DropZone(
        id=dz_id,
        name=name,
        city=name,
        region=region,
        latitude=latitude,
        longitude=1.0,
        phone="00",
        website="example.fr",
        aircraft=("Cessna 182",),
        max_altitude=4000,
        status=status
    )


CALM = WeatherObservation(temperature_celsius=20, conditions_description="Ensoleillé",
                          visibility_km=10, wind_speed_kmh=5, source="stub")
STORM = WeatherObservation(temperature_celsius=14, conditions_description="Orage violent",
                           visibility_km=1, wind_speed_kmh=40, source="stub")


class StubProvider(WeatherProvider):
    """Answers by latitude; raises for latitudes listed in failing."""

    def __init__(self, by_latitude, failing=()):
        self.by_latitude = by_latitude
        self.failing = set(failing)
        self.calls = []

    async def fetch_current_conditions(self, latitude, longitude):
        self.calls.append(latitude)
        if latitude in self.failing:
            raise WeatherProviderError(f"no data for {latitude}")
        return self.by_latitude[latitude]


ZONES = [
    drop_zone("1", "Tallard", region="Provence-Alpes-Côte d'Azur", latitude=44.0),
    drop_zone("2", "Cahors", latitude=44.35, status=DropZoneStatus.CLOSED),
    drop_zone("3", "Albi", latitude=43.9, status=DropZoneStatus.LIMITED),
]


def make_service(provider, store=None):
    return DropZoneService(
        directory=StaticDropZoneDirectory(ZONES),
        weather_provider=provider,
        favorite_repository=KeyValueFavoriteRepository(store if store is not None else InMemoryKeyValueStore())
    )


class TestDirectory:

    async def test_filters(self):
        service = make_service(StubProvider({}))

        assert [dz.id for dz in service.list_drop_zones()] == ["1", "2", "3"]
        assert [dz.id for dz in service.list_drop_zones(search="CAH")] == ["2"]
        assert [dz.id for dz in service.list_drop_zones(status=DropZoneStatus.LIMITED)] == ["3"]
        assert [dz.id for dz in service.list_drop_zones(region="Occitanie")] == ["2", "3"]
        assert service.list_drop_zones(search="Albi", status=DropZoneStatus.OPEN) == []

    async def test_regions_are_sorted_and_distinct(self):
        service = make_service(StubProvider({}))

        assert service.regions() == ["Occitanie", "Provence-Alpes-Côte d'Azur"]

    async def test_builtin_catalogue(self):
        directory = StaticDropZoneDirectory()

        assert len(directory.find_all()) == len(DROP_ZONES) == 50
        assert len({dz.id for dz in DROP_ZONES}) == 50
        assert directory.find_by_id("11").status == DropZoneStatus.CLOSED
        assert directory.find_by_id("unknown") is None


class TestRefreshWeather:

    async def test_each_zone_is_scored_in_catalogue_order(self):
        provider = StubProvider({44.0: CALM, 44.35: STORM, 43.9: CALM})
        service = make_service(provider)

        results = await service.refresh_weather(ZONES)

        assert [result.drop_zone.id for result in results] == ["1", "2", "3"]
        assert [result.safety_level for result in results] == [
            SafetyLevel.EXCELLENT, SafetyLevel.DANGEROUS, SafetyLevel.EXCELLENT
        ]
        assert results[1].safety_score == -50
        assert sorted(provider.calls) == sorted([44.0, 44.35, 43.9])

    async def test_failing_zone_does_not_affect_others(self):
        primary = StubProvider({44.0: CALM, 43.9: STORM}, failing=[44.35])
        fallback = SyntheticWeatherProvider(rng=random.Random(3))
        service = make_service(FallbackWeatherProvider(primary, fallback))

        results = await service.refresh_weather(ZONES)

        assert [result.observation.source for result in results] == ["stub", "synthetic", "stub"]
        assert results[0].safety_level == SafetyLevel.EXCELLENT
        assert results[2].safety_level == SafetyLevel.DANGEROUS

    async def test_favorites_are_flagged_for_user(self):
        store = InMemoryKeyValueStore()
        service = make_service(StubProvider({44.0: CALM, 44.35: CALM, 43.9: CALM}), store)
        user_id = uuid4()
        await service.add_favorite(user_id, "3")

        results = await service.refresh_weather(ZONES, user_id=user_id)
        anonymous = await service.refresh_weather(ZONES)

        assert [result.is_favorite for result in results] == [False, False, True]
        assert not any(result.is_favorite for result in anonymous)

    async def test_assess_location(self):
        service = make_service(StubProvider({45.5: STORM}))

        observation, score, level = await service.assess_location(45.5, 6.0)

        assert observation is STORM
        assert score == -50
        assert level == SafetyLevel.DANGEROUS


class TestFavorites:

    async def test_add_list_remove(self):
        store = InMemoryKeyValueStore()
        service = make_service(StubProvider({}), store)
        user_id = uuid4()

        await service.add_favorite(user_id, "1")
        await service.add_favorite(user_id, "3")
        await service.add_favorite(user_id, "3")

        assert await service.list_favorites(user_id) == ["1", "3"]
        assert await store.get(f"favorite:{user_id}:3") is not None
        assert await service.remove_favorite(user_id, "1") is True
        assert await service.remove_favorite(user_id, "1") is False
        assert await service.list_favorites(user_id) == ["3"]
        assert await service.list_favorites(uuid4()) == []

    async def test_unknown_drop_zone_cannot_be_favorited(self):
        service = make_service(StubProvider({}))

        with pytest.raises(ValueError, match="Drop zone not found"):
            await service.add_favorite(uuid4(), "999")
