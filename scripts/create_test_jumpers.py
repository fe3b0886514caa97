"""Script to create test jumper accounts for development."""

import asyncio

from skydive_logbook.domain.value_objects.auth import SignupData
from skydive_logbook.infrastructure.services import get_service_factory

TEST_JUMPERS = [
    SignupData(email="eleve@example.com", password="parachute123", name="Camille Élève", license_number="FFP001"),
    SignupData(email="moniteur@example.com", password="moniteur123", name="Dominique Moniteur", license_number="FFP002"),
]


async def create_test_jumpers():
    """Create test jumpers, skipping licences that already exist."""
    factory = get_service_factory()
    await factory.initialize()

    try:
        for data in TEST_JUMPERS:
            async with factory.get_auth_service() as auth_service:
                try:
                    jumper = await auth_service.signup(data)
                    print(f"✅ Created jumper: {jumper.email} ({jumper.license_number})")
                except ValueError as e:
                    print(f"ℹ️ Skipped {data.license_number}: {e}")

        print("✅ Test jumpers setup completed!")
    finally:
        await factory.shutdown()


if __name__ == "__main__":
    asyncio.run(create_test_jumpers())
