"""Port interface for signing and verifying access tokens."""

from abc import ABC, abstractmethod
from datetime import timedelta
from uuid import UUID
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skydive_logbook.domain.value_objects.auth import AuthToken


class TokenCodec(ABC):
    """Issues and verifies signed bearer tokens."""

    @abstractmethod
    def issue(self, jumper_id: UUID, expires_in: timedelta) -> "AuthToken":
        """Issue a signed token for a jumper."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> UUID:
        """Verify a token and return the jumper id it was issued to.

        Raises:
            ValueError: If the token is malformed, tampered with or expired
        """
        raise NotImplementedError
