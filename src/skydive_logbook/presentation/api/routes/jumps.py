"""Jump logbook endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from skydive_logbook.application.services.jump_service import JumpService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.presentation.api.dependencies import get_jump_service
from skydive_logbook.presentation.api.middleware.auth import get_current_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import (
    ApiResponse,
    JumpListResponse,
    JumpRequest,
    JumpResponse
)

router = APIRouter()


@router.get("")
async def list_jumps(
    current_jumper: Jumper = Depends(get_current_jumper),
    jump_service: JumpService = Depends(get_jump_service)
) -> JumpListResponse:
    """List the current jumper's jumps, newest first."""
    jumps = await jump_service.list_jumps(current_jumper.id)
    return JumpListResponse(
        jumps=[JumpResponse.from_entity(jump) for jump in jumps],
        total=len(jumps)
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_jump(
    request: JumpRequest,
    current_jumper: Jumper = Depends(get_current_jumper),
    jump_service: JumpService = Depends(get_jump_service)
) -> JumpResponse:
    """Log a new jump."""
    jump = await jump_service.log_jump(current_jumper.id, request.to_details())
    return JumpResponse.from_entity(jump)


@router.get("/{jump_id}")
async def get_jump(
    jump_id: UUID,
    current_jumper: Jumper = Depends(get_current_jumper),
    jump_service: JumpService = Depends(get_jump_service)
) -> JumpResponse:
    """Get one of the current jumper's jumps."""
    jump = await jump_service.get_jump(current_jumper.id, jump_id)
    if not jump:
        raise HTTPException(status_code=404, detail=f"Jump not found: {jump_id}")
    return JumpResponse.from_entity(jump)


@router.delete("/{jump_id}")
async def delete_jump(
    jump_id: UUID,
    current_jumper: Jumper = Depends(get_current_jumper),
    jump_service: JumpService = Depends(get_jump_service)
) -> ApiResponse:
    """Delete one of the current jumper's jumps."""
    if not await jump_service.delete_jump(current_jumper.id, jump_id):
        raise HTTPException(status_code=404, detail=f"Jump not found: {jump_id}")
    return ApiResponse(success=True, message="Jump deleted")
