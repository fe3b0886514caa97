"""Aggregate statistics over a jumper's logbook."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.jump import Jump


FREEFALL_SECONDS_PER_JUMP = 70


@dataclass(frozen=True)
class JumpStatistics:
    """Immutable summary of a jumper's logbook."""

    total_jumps: int
    total_altitude: int
    total_freefall_seconds: int
    favorite_dropzone: str
    distinct_dropzones: int
    last_jump_location: Optional[str] = None

    @property
    def total_freefall(self) -> str:
        """Freefall time rendered as "{minutes}m {seconds}s"."""
        minutes, seconds = divmod(self.total_freefall_seconds, 60)
        return f"{minutes}m {seconds}s"

    @property
    def total_altitude_km(self) -> float:
        return round(self.total_altitude / 1000, 1)

    @classmethod
    def from_jumps(cls, jumps: Iterable["Jump"]) -> "JumpStatistics":
        """Compute statistics; freefall time is estimated per jump."""
        # Newest first so ties between locations favour the most recent one.
        ordered = sorted(jumps, key=lambda jump: (jump.date, jump.jump_number), reverse=True)
        if not ordered:
            return cls(
                total_jumps=0,
                total_altitude=0,
                total_freefall_seconds=0,
                favorite_dropzone="N/A",
                distinct_dropzones=0,
            )

        counts = Counter(jump.location for jump in ordered)
        top = max(counts.values())
        favorite = next(jump.location for jump in ordered if counts[jump.location] == top)

        return cls(
            total_jumps=len(ordered),
            total_altitude=sum(jump.altitude for jump in ordered),
            total_freefall_seconds=len(ordered) * FREEFALL_SECONDS_PER_JUMP,
            favorite_dropzone=favorite,
            distinct_dropzones=len(counts),
            last_jump_location=ordered[0].location,
        )
