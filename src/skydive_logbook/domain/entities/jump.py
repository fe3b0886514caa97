"""Jump entity for logbook entries."""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


class Jump:
    """A single logged skydive."""

    def __init__(
        self,
        user_id: UUID,
        jump_number: int,
        jump_date: date,
        location: str,
        aircraft: str,
        altitude: int,
        canopy_size: Optional[int] = None,
        weather: Optional[str] = None,
        wind: Optional[str] = None,
        freefall_notes: Optional[str] = None,
        canopy_notes: Optional[str] = None,
        jump_id: Optional[UUID] = None,
        created_at: Optional[datetime] = None
    ):
        if not location or not location.strip():
            raise ValueError("Location is required")
        if not aircraft or not aircraft.strip():
            raise ValueError("Aircraft is required")
        if altitude is None or altitude <= 0:
            raise ValueError("Altitude must be a positive number")
        if canopy_size is not None and canopy_size <= 0:
            raise ValueError("Canopy size must be a positive number")
        if jump_number < 1:
            raise ValueError("Jump number must be at least 1")

        self._id = jump_id or uuid4()
        self._user_id = user_id
        self._jump_number = jump_number
        self._date = jump_date
        self._location = location.strip()
        self._aircraft = aircraft.strip()
        self._altitude = altitude
        self._canopy_size = canopy_size
        self._weather = weather
        self._wind = wind
        self._freefall_notes = freefall_notes
        self._canopy_notes = canopy_notes
        self._created_at = created_at or datetime.now(timezone.utc)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def jump_number(self) -> int:
        return self._jump_number

    @property
    def date(self) -> date:
        return self._date

    @property
    def location(self) -> str:
        return self._location

    @property
    def aircraft(self) -> str:
        return self._aircraft

    @property
    def altitude(self) -> int:
        """Exit altitude in metres."""
        return self._altitude

    @property
    def canopy_size(self) -> Optional[int]:
        """Canopy size in square feet."""
        return self._canopy_size

    @property
    def weather(self) -> Optional[str]:
        return self._weather

    @property
    def wind(self) -> Optional[str]:
        return self._wind

    @property
    def freefall_notes(self) -> Optional[str]:
        return self._freefall_notes

    @property
    def canopy_notes(self) -> Optional[str]:
        return self._canopy_notes

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the key-value store."""
        return {
            "id": str(self._id),
            "userId": str(self._user_id),
            "jumpNumber": self._jump_number,
            "date": self._date.isoformat(),
            "location": self._location,
            "aircraft": self._aircraft,
            "altitude": self._altitude,
            "canopySize": self._canopy_size,
            "weather": self._weather,
            "wind": self._wind,
            "freefallNotes": self._freefall_notes,
            "canopyNotes": self._canopy_notes,
            "created_at": self._created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Jump":
        """Rebuild a jump from its stored representation."""
        return cls(
            jump_id=UUID(data["id"]),
            user_id=UUID(data["userId"]),
            jump_number=data["jumpNumber"],
            jump_date=date.fromisoformat(data["date"]),
            location=data["location"],
            aircraft=data["aircraft"],
            altitude=data["altitude"],
            canopy_size=data.get("canopySize"),
            weather=data.get("weather"),
            wind=data.get("wind"),
            freefall_notes=data.get("freefallNotes"),
            canopy_notes=data.get("canopyNotes"),
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Jump):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"Jump(#{self._jump_number}, {self._location}, {self._date.isoformat()})"
