"""Jump safety evaluation from current weather conditions."""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Tuple

from .weather import WeatherObservation


@total_ordering
class SafetyLevel(Enum):
    """Discrete jump-safety category, ordered from worst to best."""

    DANGEROUS = "dangerous"
    POOR = "poor"
    MODERATE = "moderate"
    GOOD = "good"
    EXCELLENT = "excellent"

    @property
    def rank(self) -> int:
        """Position in the worst-to-best ordering (0 = dangerous)."""
        return list(SafetyLevel).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SafetyLevel):
            return NotImplemented
        return self.rank < other.rank


@dataclass(frozen=True)
class WindSpeedLimits:
    """Wind speed breakpoints in km/h."""

    excellent: float = 10
    good: float = 15
    moderate: float = 25
    poor: float = 35


@dataclass(frozen=True)
class VisibilityLimits:
    """Horizontal visibility breakpoints in km."""

    excellent: float = 10
    good: float = 8
    moderate: float = 5
    poor: float = 2


@dataclass(frozen=True)
class SafetyThresholds:
    """Static breakpoints used by the evaluator."""

    wind_speed: WindSpeedLimits = field(default_factory=WindSpeedLimits)
    visibility: VisibilityLimits = field(default_factory=VisibilityLimits)


DEFAULT_THRESHOLDS = SafetyThresholds()

BASE_SCORE = 100

# Penalties, most severe tier first.
WIND_PENALTIES = {"poor": 50, "moderate": 30, "good": 15, "excellent": 5}
VISIBILITY_PENALTIES = {"poor": 40, "moderate": 25, "good": 10}

# First matching group wins; order is severity precedence.
CONDITION_PENALTIES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("orage", "tempête"), 60),
    (("pluie forte", "grêle"), 40),
    (("pluie", "bruine"), 20),
    (("brouillard",), 30),
)

LEVEL_FLOORS: Tuple[Tuple[int, SafetyLevel], ...] = (
    (85, SafetyLevel.EXCELLENT),
    (70, SafetyLevel.GOOD),
    (50, SafetyLevel.MODERATE),
    (30, SafetyLevel.POOR),
)


def wind_penalty(wind_speed_kmh: float, limits: WindSpeedLimits) -> int:
    """Penalty for the highest wind tier strictly exceeded."""
    for tier in ("poor", "moderate", "good", "excellent"):
        if wind_speed_kmh > getattr(limits, tier):
            return WIND_PENALTIES[tier]
    return 0


def visibility_penalty(visibility_km: float, limits: VisibilityLimits) -> int:
    """Penalty for the lowest visibility tier strictly undershot."""
    for tier in ("poor", "moderate", "good"):
        if visibility_km < getattr(limits, tier):
            return VISIBILITY_PENALTIES[tier]
    return 0


def conditions_penalty(description: str) -> int:
    """Penalty for the most severe hazard keyword found in the description."""
    text = (description or "").lower()
    for keywords, penalty in CONDITION_PENALTIES:
        if any(keyword in text for keyword in keywords):
            return penalty
    return 0


def compute_safety_score(
    observation: WeatherObservation,
    thresholds: SafetyThresholds = DEFAULT_THRESHOLDS
) -> float:
    """Score an observation out of 100. The result is not clamped and may be negative."""
    penalty = (
        wind_penalty(observation.effective_wind_speed_kmh, thresholds.wind_speed)
        + visibility_penalty(observation.visibility_km, thresholds.visibility)
        + conditions_penalty(observation.conditions_description)
    )
    return BASE_SCORE - penalty


def categorize(score: float) -> SafetyLevel:
    """Map a safety score to its level, checking floors from high to low."""
    for floor, level in LEVEL_FLOORS:
        if score >= floor:
            return level
    return SafetyLevel.DANGEROUS


def evaluate(
    observation: WeatherObservation,
    thresholds: SafetyThresholds = DEFAULT_THRESHOLDS
) -> SafetyLevel:
    """Evaluate skydiving safety for a weather observation."""
    return categorize(compute_safety_score(observation, thresholds))
