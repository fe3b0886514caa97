"""Repositories persisted through the key-prefix store.

Key layout:
    user:{jumper_id}                 jumper profile
    jump:{jumper_id}:{jump_id}       logbook entry
    favorite:{jumper_id}:{dz_id}     favourite drop zone
    token:{token}                    issued access token
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from skydive_logbook.application.ports.repositories import (
    AuthTokenRepository,
    FavoriteRepository,
    JumperRepository,
    JumpRepository,
    KeyValueStore
)
from skydive_logbook.domain.entities.jump import Jump
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.domain.value_objects.auth import AuthToken


class KeyValueJumperRepository(JumperRepository):
    """Jumper accounts stored under user:{id}."""

    PREFIX = "user:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    async def save(self, jumper: Jumper) -> Jumper:
        """Create or update a jumper."""
        await self._store.set(f"{self.PREFIX}{jumper.id}", jumper.to_dict())
        return jumper

    async def find_by_id(self, jumper_id: UUID) -> Optional[Jumper]:
        """Find jumper by ID."""
        data = await self._store.get(f"{self.PREFIX}{jumper_id}")
        return Jumper.from_dict(data) if data else None

    async def find_by_license_number(self, license_number: str) -> Optional[Jumper]:
        """Find jumper by licence number (case-insensitive)."""
        wanted = license_number.strip().upper()
        for data in await self._store.get_by_prefix(self.PREFIX):
            if data.get("license") == wanted:
                return Jumper.from_dict(data)
        return None

    async def find_by_email(self, email: str) -> Optional[Jumper]:
        """Find jumper by email (case-insensitive)."""
        wanted = email.strip().lower()
        for data in await self._store.get_by_prefix(self.PREFIX):
            if data.get("email") == wanted:
                return Jumper.from_dict(data)
        return None


class KeyValueJumpRepository(JumpRepository):
    """Jumps stored under jump:{user_id}:{jump_id}."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def _key(user_id: UUID, jump_id: UUID) -> str:
        return f"jump:{user_id}:{jump_id}"

    async def save(self, jump: Jump) -> Jump:
        """Save a jump."""
        await self._store.set(self._key(jump.user_id, jump.id), jump.to_dict())
        return jump

    async def find_by_id(self, user_id: UUID, jump_id: UUID) -> Optional[Jump]:
        """Find one of a user's jumps."""
        data = await self._store.get(self._key(user_id, jump_id))
        return Jump.from_dict(data) if data else None

    async def find_by_user_id(self, user_id: UUID) -> List[Jump]:
        """Find all jumps of a user."""
        return [Jump.from_dict(data) for data in await self._store.get_by_prefix(f"jump:{user_id}:")]

    async def delete(self, user_id: UUID, jump_id: UUID) -> bool:
        """Delete one of a user's jumps."""
        return await self._store.delete(self._key(user_id, jump_id))


class KeyValueFavoriteRepository(FavoriteRepository):
    """Favourite drop zones stored under favorite:{user_id}:{dropzone_id}."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    async def list_ids(self, user_id: UUID) -> List[str]:
        """List favourite drop zone ids for a user."""
        return [data["dropzoneId"] for data in await self._store.get_by_prefix(f"favorite:{user_id}:")]

    async def add(self, user_id: UUID, dropzone_id: str) -> None:
        """Mark a drop zone as favourite."""
        await self._store.set(f"favorite:{user_id}:{dropzone_id}", {
            "userId": str(user_id),
            "dropzoneId": dropzone_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        })

    async def remove(self, user_id: UUID, dropzone_id: str) -> bool:
        """Remove a drop zone from favourites."""
        return await self._store.delete(f"favorite:{user_id}:{dropzone_id}")


class KeyValueAuthTokenRepository(AuthTokenRepository):
    """Issued access tokens stored under token:{token}."""

    PREFIX = "token:"

    def __init__(self, store: KeyValueStore):
        self._store = store

    async def save_token(self, token: AuthToken) -> bool:
        """Save authentication token."""
        await self._store.set(f"{self.PREFIX}{token.token}", {
            "token": token.token,
            "jumper_id": str(token.jumper_id),
            "expires_at": token.expires_at.isoformat(),
            "created_at": token.created_at.isoformat(),
        })
        return True

    async def find_token(self, token: str) -> Optional[AuthToken]:
        """Find authentication token."""
        data = await self._store.get(f"{self.PREFIX}{token}")
        return self._to_token(data) if data else None

    async def invalidate_token(self, token: str) -> bool:
        """Invalidate authentication token."""
        return await self._store.delete(f"{self.PREFIX}{token}")

    async def cleanup_expired_tokens(self) -> int:
        """Clean up expired tokens."""
        expired = [
            auth_token for auth_token in map(self._to_token, await self._store.get_by_prefix(self.PREFIX))
            if auth_token.is_expired
        ]
        for auth_token in expired:
            await self._store.delete(f"{self.PREFIX}{auth_token.token}")
        return len(expired)

    @staticmethod
    def _to_token(data: dict) -> AuthToken:
        return AuthToken(
            token=data["token"],
            jumper_id=UUID(data["jumper_id"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
            created_at=datetime.fromisoformat(data["created_at"]),
        )
