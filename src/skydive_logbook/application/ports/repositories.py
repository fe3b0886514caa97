"""Port interfaces for repositories (Dependency Inversion Principle)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from skydive_logbook.domain.entities.jumper import Jumper
    from skydive_logbook.domain.entities.jump import Jump
    from skydive_logbook.domain.entities.drop_zone import DropZone
    from skydive_logbook.domain.value_objects.auth import AuthToken


class KeyValueStore(ABC):
    """Port interface for a generic key-prefix document store."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get the value stored under a key."""
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: Dict[str, Any]) -> None:
        """Store a value under a key, replacing any previous value."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns False when the key did not exist."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_prefix(self, prefix: str) -> List[Dict[str, Any]]:
        """Get all values whose key starts with prefix, in key order."""
        raise NotImplementedError


class JumperRepository(ABC):
    """Port interface for jumper account repository."""

    @abstractmethod
    async def save(self, jumper: "Jumper") -> "Jumper":
        """Create or update a jumper."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, jumper_id: UUID) -> Optional["Jumper"]:
        """Find jumper by ID."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_license_number(self, license_number: str) -> Optional["Jumper"]:
        """Find jumper by federation licence number."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional["Jumper"]:
        """Find jumper by email."""
        raise NotImplementedError


class JumpRepository(ABC):
    """Port interface for the per-user jump log."""

    @abstractmethod
    async def save(self, jump: "Jump") -> "Jump":
        """Save a jump."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, user_id: UUID, jump_id: UUID) -> Optional["Jump"]:
        """Find one of a user's jumps."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> List["Jump"]:
        """Find all jumps of a user, in no particular order."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, user_id: UUID, jump_id: UUID) -> bool:
        """Delete one of a user's jumps."""
        raise NotImplementedError


class FavoriteRepository(ABC):
    """Port interface for favourite drop zones."""

    @abstractmethod
    async def list_ids(self, user_id: UUID) -> List[str]:
        """List favourite drop zone ids for a user."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, user_id: UUID, dropzone_id: str) -> None:
        """Mark a drop zone as favourite."""
        raise NotImplementedError

    @abstractmethod
    async def remove(self, user_id: UUID, dropzone_id: str) -> bool:
        """Remove a drop zone from favourites."""
        raise NotImplementedError


class DropZoneDirectory(ABC):
    """Port interface for the static drop zone directory."""

    @abstractmethod
    def find_all(self) -> List["DropZone"]:
        """All drop zones in catalogue order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, dropzone_id: str) -> Optional["DropZone"]:
        """Find a drop zone by id."""
        raise NotImplementedError


class AuthTokenRepository(ABC):
    """Port interface for issued authentication tokens."""

    @abstractmethod
    async def save_token(self, token: "AuthToken") -> bool:
        """Save authentication token."""
        raise NotImplementedError

    @abstractmethod
    async def find_token(self, token: str) -> Optional["AuthToken"]:
        """Find authentication token."""
        raise NotImplementedError

    @abstractmethod
    async def invalidate_token(self, token: str) -> bool:
        """Invalidate authentication token."""
        raise NotImplementedError

    @abstractmethod
    async def cleanup_expired_tokens(self) -> int:
        """Clean up expired tokens."""
        raise NotImplementedError
