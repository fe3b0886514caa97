"""Contract tests for the key-prefix store implementations."""

import pytest
import pytest_asyncio

from skydive_logbook.infrastructure.database.connection import DatabaseManager, to_async_url
from skydive_logbook.infrastructure.repositories.memory_repositories import InMemoryKeyValueStore
from skydive_logbook.infrastructure.repositories.sql_repositories import SQLAlchemyKeyValueStore

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def database_manager(tmp_path):
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}")
    await manager.connect()
    await manager.create_tables()
    yield manager
    await manager.disconnect()


@pytest_asyncio.fixture(params=["memory", "sql"])
async def store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryKeyValueStore()
        return

    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}")
    await manager.connect()
    await manager.create_tables()
    async with manager.get_session() as session:
        yield SQLAlchemyKeyValueStore(session)
    await manager.disconnect()


class TestKeyValueStoreContract:

    async def test_get_missing_key(self, store):
        assert await store.get("user:missing") is None

    async def test_set_and_overwrite(self, store):
        await store.set("user:1", {"name": "Alex", "total_jumps": 3})
        await store.set("user:1", {"name": "Alex", "total_jumps": 4})

        assert await store.get("user:1") == {"name": "Alex", "total_jumps": 4}

    async def test_delete(self, store):
        await store.set("token:abc", {"token": "abc"})

        assert await store.delete("token:abc") is True
        assert await store.get("token:abc") is None
        assert await store.delete("token:abc") is False

    async def test_prefix_scan_in_key_order(self, store):
        await store.set("jump:u1:b", {"n": 2})
        await store.set("jump:u1:a", {"n": 1})
        await store.set("jump:u2:a", {"n": 99})
        await store.set("user:u1", {"n": 0})

        assert await store.get_by_prefix("jump:u1:") == [{"n": 1}, {"n": 2}]
        assert await store.get_by_prefix("favorite:") == []

    async def test_prefix_wildcards_are_literal(self, store):
        await store.set("jump:u_1:a", {"n": 1})
        await store.set("jump:ux1:a", {"n": 2})

        assert await store.get_by_prefix("jump:u_1:") == [{"n": 1}]


class TestInMemoryIsolation:

    async def test_values_are_copied(self):
        store = InMemoryKeyValueStore()
        value = {"aircraft": ["Cessna 182"]}
        await store.set("k", value)

        value["aircraft"].append("Twin Otter")
        fetched = await store.get("k")
        fetched["aircraft"].clear()

        assert await store.get("k") == {"aircraft": ["Cessna 182"]}
        assert len(store) == 1


class TestSQLAlchemyPersistence:

    async def test_values_survive_across_sessions(self, database_manager):
        async with database_manager.get_session() as session:
            await SQLAlchemyKeyValueStore(session).set("user:1", {"license": "FFP1"})

        async with database_manager.get_session() as session:
            store = SQLAlchemyKeyValueStore(session)
            assert await store.get("user:1") == {"license": "FFP1"}
            assert await store.get_by_prefix("user:") == [{"license": "FFP1"}]

    async def test_failed_unit_of_work_is_rolled_back(self, database_manager):
        with pytest.raises(RuntimeError):
            async with database_manager.get_session() as session:
                await SQLAlchemyKeyValueStore(session).set("user:2", {"license": "FFP2"})
                raise RuntimeError("boom")

        async with database_manager.get_session() as session:
            assert await SQLAlchemyKeyValueStore(session).get("user:2") is None


@pytest.mark.parametrize("url, expected", [
    ("postgresql://u:p@db/logbook", "postgresql+asyncpg://u:p@db/logbook"),
    ("postgres://u:p@db/logbook", "postgresql+asyncpg://u:p@db/logbook"),
    ("sqlite:///logbook.db", "sqlite+aiosqlite:///logbook.db"),
    ("sqlite+aiosqlite:///logbook.db", "sqlite+aiosqlite:///logbook.db"),
])
async def test_database_url_uses_async_driver(url, expected):
    assert to_async_url(url) == expected
