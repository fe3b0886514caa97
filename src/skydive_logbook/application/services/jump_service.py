"""Jump service implementing logbook use cases."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

from skydive_logbook.domain.entities.jump import Jump
from skydive_logbook.domain.value_objects.jump_statistics import JumpStatistics
from skydive_logbook.infrastructure.logging import get_logger, log_with_extra

if TYPE_CHECKING:
    from skydive_logbook.application.ports.repositories import JumpRepository, JumperRepository


@dataclass(frozen=True)
class JumpDetails:
    """Fields supplied by the jumper when logging a jump."""
    jump_date: date
    location: str
    aircraft: str
    altitude: int
    canopy_size: Optional[int] = None
    weather: Optional[str] = None
    wind: Optional[str] = None
    freefall_notes: Optional[str] = None
    canopy_notes: Optional[str] = None


class JumpService:
    """Application service for the jump logbook."""

    def __init__(
        self,
        jump_repository: "JumpRepository",
        jumper_repository: "JumperRepository"
    ):
        self._jump_repository = jump_repository
        self._jumper_repository = jumper_repository
        self._logger = get_logger(__name__)

    async def log_jump(self, user_id: UUID, details: JumpDetails) -> Jump:
        """Append a jump to the user's logbook.

        Jump numbers keep increasing even after deletions.

        Raises:
            ValueError: If required fields are missing or invalid
        """
        existing = await self._jump_repository.find_by_user_id(user_id)
        jumper = await self._jumper_repository.find_by_id(user_id)
        last_number = max((jump.jump_number for jump in existing), default=0)
        if jumper:
            last_number = max(last_number, jumper.last_jump_number)
        jump_number = last_number + 1

        jump = Jump(
            user_id=user_id,
            jump_number=jump_number,
            jump_date=details.jump_date,
            location=details.location,
            aircraft=details.aircraft,
            altitude=details.altitude,
            canopy_size=details.canopy_size,
            weather=details.weather,
            wind=details.wind,
            freefall_notes=details.freefall_notes,
            canopy_notes=details.canopy_notes
        )
        saved = await self._jump_repository.save(jump)

        if jumper:
            jumper.last_jump_number = jump_number
            jumper.total_jumps = len(existing) + 1
            await self._jumper_repository.save(jumper)

        log_with_extra(
            self._logger,
            logging.INFO,
            f"Jump #{jump_number} logged",
            jump_id=str(saved.id),
            user_id=str(user_id),
            location=saved.location
        )
        return saved

    async def list_jumps(self, user_id: UUID) -> List[Jump]:
        """List a user's jumps, newest first."""
        jumps = await self._jump_repository.find_by_user_id(user_id)
        return sorted(jumps, key=lambda jump: (jump.date, jump.jump_number), reverse=True)

    async def get_jump(self, user_id: UUID, jump_id: UUID) -> Optional[Jump]:
        """Get one of the user's jumps."""
        return await self._jump_repository.find_by_id(user_id, jump_id)

    async def delete_jump(self, user_id: UUID, jump_id: UUID) -> bool:
        """Delete one of the user's jumps. Returns False if it does not exist."""
        deleted = await self._jump_repository.delete(user_id, jump_id)
        if not deleted:
            return False

        jumper = await self._jumper_repository.find_by_id(user_id)
        if jumper:
            jumper.total_jumps = len(await self._jump_repository.find_by_user_id(user_id))
            await self._jumper_repository.save(jumper)
        self._logger.info(f"Deleted jump {jump_id} for user {user_id}")
        return True

    async def get_statistics(self, user_id: UUID) -> JumpStatistics:
        """Aggregate statistics over the user's logbook."""
        jumps = await self._jump_repository.find_by_user_id(user_id)
        return JumpStatistics.from_jumps(jumps)
