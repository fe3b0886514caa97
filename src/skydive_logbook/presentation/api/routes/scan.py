"""Logbook page scan endpoint."""

from fastapi import APIRouter, Depends, File, UploadFile

from skydive_logbook.application.services.scan_service import ScanService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.presentation.api.dependencies import get_scan_service
from skydive_logbook.presentation.api.middleware.auth import get_current_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import ScanResponse

router = APIRouter()


@router.post("")
async def scan_logbook_page(
    image: UploadFile = File(...),
    current_jumper: Jumper = Depends(get_current_jumper),
    scan_service: ScanService = Depends(get_scan_service)
) -> ScanResponse:
    """Upload a photographed logbook page and get proposed entries back."""
    content = await image.read()
    result = scan_service.scan_logbook_page(current_jumper.id, image.filename or "", content)
    return ScanResponse.from_result(result)
