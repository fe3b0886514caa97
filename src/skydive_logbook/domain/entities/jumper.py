"""Jumper entity: the owner of a logbook."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


class Jumper:
    """Jumper account profile."""

    def __init__(
        self,
        email: str,
        name: str,
        license_number: str,
        password_hash: str = "",
        jumper_id: Optional[UUID] = None,
        total_jumps: int = 0,
        last_jump_number: int = 0,
        failed_login_attempts: int = 0,
        locked_until: Optional[datetime] = None,
        last_login: Optional[datetime] = None,
        join_date: Optional[datetime] = None
    ):
        self._id = jumper_id or uuid4()
        self._email = email.lower().strip()
        self._name = name.strip()
        self._license_number = license_number.strip().upper()
        self.password_hash = password_hash
        self.total_jumps = total_jumps
        # Highest jump number ever issued; never lowered by deletions
        self.last_jump_number = max(last_jump_number, total_jumps)
        self.failed_login_attempts = failed_login_attempts
        self.locked_until = locked_until
        self.last_login = last_login
        self._join_date = join_date or datetime.now(timezone.utc)

    @property
    def id(self) -> UUID:
        """Get jumper ID."""
        return self._id

    @property
    def email(self) -> str:
        """Get jumper email."""
        return self._email

    @property
    def name(self) -> str:
        """Get jumper display name."""
        return self._name

    @property
    def license_number(self) -> str:
        """Get federation licence number."""
        return self._license_number

    @property
    def join_date(self) -> datetime:
        """Get account creation date."""
        return self._join_date

    def is_locked(self, now: Optional[datetime] = None) -> bool:
        """Check whether login is currently locked out."""
        now = now or datetime.now(timezone.utc)
        return self.locked_until is not None and self.locked_until > now

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the key-value store."""
        return {
            "id": str(self._id),
            "email": self._email,
            "name": self._name,
            "license": self._license_number,
            "password_hash": self.password_hash,
            "total_jumps": self.total_jumps,
            "last_jump_number": self.last_jump_number,
            "failed_login_attempts": self.failed_login_attempts,
            "locked_until": self.locked_until.isoformat() if self.locked_until else None,
            "last_login": self.last_login.isoformat() if self.last_login else None,
            "join_date": self._join_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Jumper":
        """Rebuild a jumper from its stored representation."""
        return cls(
            jumper_id=UUID(data["id"]),
            email=data["email"],
            name=data["name"],
            license_number=data["license"],
            password_hash=data.get("password_hash", ""),
            total_jumps=data.get("total_jumps", 0),
            last_jump_number=data.get("last_jump_number", 0),
            failed_login_attempts=data.get("failed_login_attempts", 0),
            locked_until=_parse_datetime(data.get("locked_until")),
            last_login=_parse_datetime(data.get("last_login")),
            join_date=_parse_datetime(data.get("join_date")),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Jumper):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"Jumper({self._id}, {self._license_number})"


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)
