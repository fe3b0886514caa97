"""User-facing presentation attributes for safety levels and drop zone status."""

from dataclasses import dataclass
from typing import Dict, Optional

from skydive_logbook.domain.entities.drop_zone import DropZoneStatus
from skydive_logbook.domain.value_objects.safety import SafetyLevel


@dataclass(frozen=True)
class SafetyDisplay:
    label: str
    color_class: str
    icon: str
    advisory: Optional[str] = None


SAFETY_DISPLAY: Dict[SafetyLevel, SafetyDisplay] = {
    SafetyLevel.EXCELLENT: SafetyDisplay("Excellent", "bg-green-100 text-green-800", "🟢"),
    SafetyLevel.GOOD: SafetyDisplay("Bon", "bg-blue-100 text-blue-800", "🔵"),
    SafetyLevel.MODERATE: SafetyDisplay("Modéré", "bg-yellow-100 text-yellow-800", "🟡"),
    SafetyLevel.POOR: SafetyDisplay(
        "Difficile", "bg-orange-100 text-orange-800", "🟠",
        advisory="Conditions difficiles - Expérience requise"
    ),
    SafetyLevel.DANGEROUS: SafetyDisplay(
        "Dangereux", "bg-red-100 text-red-800", "🔴",
        advisory="Conditions non recommandées pour le parachutisme"
    ),
}

STATUS_MARKER_COLORS: Dict[DropZoneStatus, str] = {
    DropZoneStatus.OPEN: "#10b981",
    DropZoneStatus.LIMITED: "#f59e0b",
    DropZoneStatus.CLOSED: "#ef4444",
}


def safety_display(level: SafetyLevel) -> SafetyDisplay:
    return SAFETY_DISPLAY[level]
