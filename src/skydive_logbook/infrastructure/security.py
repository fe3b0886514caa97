"""JWT access tokens signed with python-jose."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

from jose import JWTError, jwt

from skydive_logbook.application.ports.security import TokenCodec
from skydive_logbook.domain.value_objects.auth import AuthToken


class JoseTokenCodec(TokenCodec):
    """Signs access tokens as JWTs carrying the jumper id in the subject claim."""

    TOKEN_TYPE = "access_token"

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self._secret_key = secret_key
        self._algorithm = algorithm

    def issue(self, jumper_id: UUID, expires_in: timedelta) -> AuthToken:
        """Create a signed access token for a jumper."""
        now = datetime.now(timezone.utc)
        expire = now + expires_in

        to_encode = {
            "sub": str(jumper_id),
            "exp": expire,
            "iat": now,
            "jti": str(uuid4()),
            "type": self.TOKEN_TYPE
        }

        encoded_jwt = jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)
        return AuthToken(
            token=encoded_jwt,
            jumper_id=jumper_id,
            expires_at=expire,
            created_at=now
        )

    def verify(self, token: str) -> UUID:
        """Decode a token and return its subject.

        Raises:
            ValueError: If the signature, expiry or claims are invalid
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            raise ValueError(f"Invalid authentication token: {e}") from e

        if payload.get("type") != self.TOKEN_TYPE:
            raise ValueError("Invalid token: unexpected token type")

        subject = payload.get("sub")
        if subject is None:
            raise ValueError("Invalid token: missing subject")

        try:
            return UUID(subject)
        except ValueError as e:
            raise ValueError("Invalid token: malformed subject") from e
