"""Dependency injection and service factory."""

from datetime import timedelta
from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from skydive_logbook.application.ports.repositories import KeyValueStore
from skydive_logbook.application.ports.weather import WeatherProvider
from skydive_logbook.application.services.auth_service import AuthenticationService
from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.application.services.jump_service import JumpService
from skydive_logbook.application.services.scan_service import ScanService
from skydive_logbook.infrastructure.database.connection import DatabaseManager
from skydive_logbook.infrastructure.logging import get_logger
from skydive_logbook.infrastructure.repositories.kv_repositories import (
    KeyValueAuthTokenRepository,
    KeyValueFavoriteRepository,
    KeyValueJumperRepository,
    KeyValueJumpRepository
)
from skydive_logbook.infrastructure.repositories.memory_repositories import InMemoryKeyValueStore
from skydive_logbook.infrastructure.repositories.sql_repositories import SQLAlchemyKeyValueStore
from skydive_logbook.infrastructure.repositories.static_drop_zones import StaticDropZoneDirectory
from skydive_logbook.infrastructure.security import JoseTokenCodec
from skydive_logbook.infrastructure.weather.fallback import FallbackWeatherProvider
from skydive_logbook.infrastructure.weather.openweathermap import OpenWeatherMapProvider
from skydive_logbook.infrastructure.weather.synthetic import SyntheticWeatherProvider
from skydive_logbook.presentation.api.config import Settings, get_settings

logger = get_logger(__name__)


def build_weather_provider(settings: Settings) -> WeatherProvider:
    """OpenWeatherMap with a synthetic fallback when a key is configured, synthetic otherwise."""
    if not settings.openweather_api_key:
        logger.info("No OpenWeatherMap API key configured, using synthetic weather")
        return SyntheticWeatherProvider()

    return FallbackWeatherProvider(
        primary=OpenWeatherMapProvider(
            api_key=settings.openweather_api_key,
            base_url=settings.openweather_base_url,
            timeout_seconds=settings.weather_timeout_seconds
        ),
        fallback=SyntheticWeatherProvider()
    )


class ServiceFactory:
    """Factory for creating application services with proper dependencies."""

    def __init__(
        self,
        settings: Settings,
        weather_provider: Optional[WeatherProvider] = None
    ):
        self.settings = settings
        self.database_manager: Optional[DatabaseManager] = None
        # Shared across requests when running without a database
        self._memory_store: Optional[InMemoryKeyValueStore] = None

        if settings.storage_backend == "memory":
            self._memory_store = InMemoryKeyValueStore()
        else:
            self.database_manager = DatabaseManager(settings.database_url, echo=settings.database_echo)

        self._weather_provider = weather_provider or build_weather_provider(settings)
        self._drop_zone_directory = StaticDropZoneDirectory()
        self._token_codec = JoseTokenCodec(settings.secret_key, settings.algorithm)
        self._scan_service = ScanService()

    async def initialize(self):
        """Initialize the service factory."""
        if self.database_manager and not self.database_manager.is_connected:
            await self.database_manager.connect()
            await self.database_manager.create_tables()

    async def shutdown(self):
        """Shutdown the service factory."""
        await self._weather_provider.close()
        if self.database_manager and self.database_manager.is_connected:
            await self.database_manager.disconnect()

    @asynccontextmanager
    async def _store(self) -> AsyncGenerator[KeyValueStore, None]:
        """Yield the key-value store for one unit of work."""
        if self._memory_store is not None:
            yield self._memory_store
            return

        async with self.database_manager.get_session() as session:
            yield SQLAlchemyKeyValueStore(session)

    @asynccontextmanager
    async def get_auth_service(self) -> AsyncGenerator[AuthenticationService, None]:
        """Get authentication service."""
        async with self._store() as store:
            yield AuthenticationService(
                jumper_repository=KeyValueJumperRepository(store),
                token_repository=KeyValueAuthTokenRepository(store),
                token_codec=self._token_codec,
                token_expiry=timedelta(minutes=self.settings.access_token_expire_minutes)
            )

    @asynccontextmanager
    async def get_jump_service(self) -> AsyncGenerator[JumpService, None]:
        """Get jump logbook service."""
        async with self._store() as store:
            yield JumpService(
                jump_repository=KeyValueJumpRepository(store),
                jumper_repository=KeyValueJumperRepository(store)
            )

    @asynccontextmanager
    async def get_drop_zone_service(self) -> AsyncGenerator[DropZoneService, None]:
        """Get drop zone service with the shared weather provider."""
        async with self._store() as store:
            yield DropZoneService(
                directory=self._drop_zone_directory,
                weather_provider=self._weather_provider,
                favorite_repository=KeyValueFavoriteRepository(store)
            )

    def get_scan_service(self) -> ScanService:
        """Get logbook scan service."""
        return self._scan_service


# Global service factory instance
_service_factory: ServiceFactory | None = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        _service_factory = ServiceFactory(get_settings())

    return _service_factory


def set_service_factory(factory: Optional[ServiceFactory]) -> None:
    """Replace the global service factory (used by tests)."""
    global _service_factory
    _service_factory = factory


async def initialize_services():
    """Initialize application services."""
    factory = get_service_factory()
    await factory.initialize()


async def shutdown_services():
    """Shutdown application services."""
    factory = get_service_factory()
    await factory.shutdown()
