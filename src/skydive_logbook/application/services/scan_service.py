"""Logbook page scanning (mock: no recognition is performed)."""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from uuid import UUID, uuid4

from skydive_logbook.infrastructure.logging import get_logger

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "heic", "webp"}
MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class ScannedJump:
    """A jump entry proposed from a scanned logbook page."""
    id: UUID
    jump_date: date
    location: str
    aircraft: str
    altitude: int
    canopy_size: Optional[int]
    weather: Optional[str]
    wind: Optional[str]
    freefall_notes: Optional[str]
    canopy_notes: Optional[str]
    confidence: float


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan request."""
    image_name: str
    scanned_jumps: List[ScannedJump]


class ScanService:
    """Returns canned entries for an uploaded logbook page."""

    def __init__(self):
        self._logger = get_logger(__name__)

    def scan_logbook_page(self, user_id: UUID, filename: str, content: bytes) -> ScanResult:
        """Validate an upload and return placeholder scanned entries.

        Raises:
            ValueError: If no image, an unsupported file type or an oversized file is provided
        """
        if not content:
            raise ValueError("No image provided")
        if len(content) > MAX_UPLOAD_BYTES:
            raise ValueError("Image is too large")

        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if extension not in ALLOWED_EXTENSIONS:
            raise ValueError(f"Unsupported image type: {extension or 'unknown'}")

        image_name = f"{user_id}/{uuid4()}.{extension}"
        self._logger.info(f"Mock scan of {len(content)} bytes stored as {image_name}")

        return ScanResult(
            image_name=image_name,
            scanned_jumps=[
                ScannedJump(
                    id=uuid4(),
                    jump_date=date(2024, 2, 15),
                    location="Bourg-en-Bresse",
                    aircraft="Cessna 182",
                    altitude=4000,
                    canopy_size=260,
                    weather="Nuageux 18°C",
                    wind="10 kt NO",
                    freefall_notes="Bon saut, position stable",
                    canopy_notes="Atterrissage précis",
                    confidence=0.85
                )
            ]
        )
