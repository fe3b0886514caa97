"""Profile endpoint."""

from fastapi import APIRouter, Depends

from skydive_logbook.application.services.jump_service import JumpService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.presentation.api.dependencies import get_jump_service
from skydive_logbook.presentation.api.middleware.auth import get_current_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import JumperProfileResponse

router = APIRouter()


@router.get("")
async def get_profile(
    current_jumper: Jumper = Depends(get_current_jumper),
    jump_service: JumpService = Depends(get_jump_service)
) -> JumperProfileResponse:
    """Current jumper profile with logbook statistics."""
    statistics = await jump_service.get_statistics(current_jumper.id)
    return JumperProfileResponse.from_jumper(current_jumper, statistics)
