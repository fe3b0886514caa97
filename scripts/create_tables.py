"""Script to initialize the kv_store table."""

import asyncio

from skydive_logbook.infrastructure.database.connection import DatabaseManager
from skydive_logbook.presentation.api.config import get_settings


async def create_tables():
    """Create all database tables."""
    settings = get_settings()
    database_manager = DatabaseManager(settings.database_url, echo=True)

    try:
        await database_manager.connect()
        await database_manager.create_tables()
        print("✅ Database tables created successfully!")

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise
    finally:
        await database_manager.disconnect()


if __name__ == "__main__":
    asyncio.run(create_tables())
