"""Unit tests for the jump logbook service."""

import pytest
import pytest_asyncio
from datetime import date
from uuid import uuid4

from skydive_logbook.application.services.jump_service import JumpDetails, JumpService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.infrastructure.repositories.kv_repositories import (
    KeyValueJumperRepository,
    KeyValueJumpRepository
)
from skydive_logbook.infrastructure.repositories.memory_repositories import InMemoryKeyValueStore

# Mark all async tests in this module
pytestmark = pytest.mark.asyncio


def details(location="Gap-Tallard", jump_date=date(2024, 5, 1), altitude=4000, **kwargs) -> JumpDetails:
    return JumpDetails(
        jump_date=jump_date,
        location=location,
        aircraft=kwargs.get("aircraft", "Pilatus PC-6"),
        altitude=altitude,
        canopy_size=kwargs.get("canopy_size", 210),
        weather=kwargs.get("weather"),
        wind=kwargs.get("wind"),
        freefall_notes=kwargs.get("freefall_notes"),
        canopy_notes=kwargs.get("canopy_notes")
    )


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def jumper_repository(store):
    return KeyValueJumperRepository(store)


@pytest.fixture
def jump_service(store, jumper_repository):
    return JumpService(KeyValueJumpRepository(store), jumper_repository)


@pytest_asyncio.fixture
async def jumper(jumper_repository):
    jumper = Jumper(email="alex@example.com", name="Alex", license_number="FFP100")
    await jumper_repository.save(jumper)
    return jumper


class TestLogJump:

    async def test_first_jump_is_number_one(self, jump_service, jumper, jumper_repository, store):
        jump = await jump_service.log_jump(jumper.id, details())

        assert jump.jump_number == 1
        assert await store.get(f"jump:{jumper.id}:{jump.id}") is not None
        assert (await jumper_repository.find_by_id(jumper.id)).total_jumps == 1

    async def test_numbers_are_not_reused_after_deletion(self, jump_service, jumper):
        first = await jump_service.log_jump(jumper.id, details())
        second = await jump_service.log_jump(jumper.id, details())
        await jump_service.delete_jump(jumper.id, first.id)

        third = await jump_service.log_jump(jumper.id, details())

        assert second.jump_number == 2
        assert third.jump_number == 3

    async def test_latest_number_is_not_reused_after_deletion(self, jump_service, jumper, jumper_repository):
        await jump_service.log_jump(jumper.id, details())
        latest = await jump_service.log_jump(jumper.id, details())
        await jump_service.delete_jump(jumper.id, latest.id)

        replacement = await jump_service.log_jump(jumper.id, details())

        assert replacement.jump_number == 3
        assert (await jumper_repository.find_by_id(jumper.id)).last_jump_number == 3

    async def test_total_jumps_follows_deletions(self, jump_service, jumper, jumper_repository):
        first = await jump_service.log_jump(jumper.id, details())
        await jump_service.log_jump(jumper.id, details())

        await jump_service.delete_jump(jumper.id, first.id)

        assert (await jumper_repository.find_by_id(jumper.id)).total_jumps == 1

    async def test_invalid_jump_is_rejected(self, jump_service, jumper):
        with pytest.raises(ValueError, match="Altitude"):
            await jump_service.log_jump(jumper.id, details(altitude=-1))

        assert await jump_service.list_jumps(jumper.id) == []


class TestListAndDelete:

    async def test_list_is_newest_first(self, jump_service, jumper):
        await jump_service.log_jump(jumper.id, details(location="A", jump_date=date(2024, 3, 1)))
        await jump_service.log_jump(jumper.id, details(location="B", jump_date=date(2024, 6, 1)))
        await jump_service.log_jump(jumper.id, details(location="C", jump_date=date(2024, 4, 1)))

        jumps = await jump_service.list_jumps(jumper.id)

        assert [jump.location for jump in jumps] == ["B", "C", "A"]

    async def test_jumps_are_private_to_their_owner(self, jump_service, jumper):
        jump = await jump_service.log_jump(jumper.id, details())
        stranger = uuid4()

        assert await jump_service.get_jump(stranger, jump.id) is None
        assert await jump_service.delete_jump(stranger, jump.id) is False
        assert await jump_service.get_jump(jumper.id, jump.id) == jump

    async def test_delete_unknown_jump(self, jump_service, jumper):
        assert await jump_service.delete_jump(jumper.id, uuid4()) is False


class TestStatistics:

    async def test_statistics_over_logbook(self, jump_service, jumper):
        await jump_service.log_jump(jumper.id, details(location="Pujaut", altitude=3000))
        await jump_service.log_jump(jumper.id, details(location="Pujaut", altitude=4000, jump_date=date(2024, 5, 2)))

        stats = await jump_service.get_statistics(jumper.id)

        assert stats.total_jumps == 2
        assert stats.total_altitude == 7000
        assert stats.favorite_dropzone == "Pujaut"
        assert stats.total_freefall == "2m 20s"
