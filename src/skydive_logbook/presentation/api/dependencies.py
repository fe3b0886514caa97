"""FastAPI dependencies providing application services."""

from typing import AsyncGenerator

from skydive_logbook.application.services.auth_service import AuthenticationService
from skydive_logbook.application.services.drop_zone_service import DropZoneService
from skydive_logbook.application.services.jump_service import JumpService
from skydive_logbook.application.services.scan_service import ScanService
from skydive_logbook.infrastructure.services import get_service_factory


async def get_auth_service() -> AsyncGenerator[AuthenticationService, None]:
    """Dependency to get authentication service."""
    async with get_service_factory().get_auth_service() as auth_service:
        yield auth_service


async def get_jump_service() -> AsyncGenerator[JumpService, None]:
    """Dependency to get jump logbook service."""
    async with get_service_factory().get_jump_service() as jump_service:
        yield jump_service


async def get_drop_zone_service() -> AsyncGenerator[DropZoneService, None]:
    """Dependency to get drop zone service."""
    async with get_service_factory().get_drop_zone_service() as drop_zone_service:
        yield drop_zone_service


def get_scan_service() -> ScanService:
    return get_service_factory().get_scan_service()
