"""Authentication-related value objects and services."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID
import hashlib
import secrets


@dataclass(frozen=True)
class LoginCredentials:
    """Value object for login credentials (licence number + password)."""
    license_number: str
    password: str

    def __post_init__(self) -> None:
        """Validate credentials."""
        if not self.license_number or not self.license_number.strip():
            raise ValueError("License number cannot be empty")
        if not self.password:
            raise ValueError("Password cannot be empty")

    @property
    def normalized_license(self) -> str:
        """Licence numbers are stored upper-cased without surrounding spaces."""
        return self.license_number.strip().upper()


@dataclass(frozen=True)
class SignupData:
    """Value object for a new account request."""
    email: str
    password: str
    name: str
    license_number: str

    def __post_init__(self) -> None:
        """Validate signup data."""
        if not all(value and value.strip() for value in (self.email, self.password, self.name, self.license_number)):
            raise ValueError("All fields are required")
        if "@" not in self.email:
            raise ValueError("Invalid email format")
        if len(self.password) < 8:
            raise ValueError("Password must be at least 8 characters long")


@dataclass(frozen=True)
class AuthToken:
    """Value object for an issued access token."""
    token: str
    jumper_id: UUID
    expires_at: datetime
    created_at: datetime

    @property
    def is_expired(self) -> bool:
        """Check if token is expired."""
        return datetime.now(timezone.utc) > self.expires_at


@dataclass(frozen=True)
class LoginResult:
    """Value object for login operation result."""
    success: bool
    jumper_id: Optional[UUID] = None
    token: Optional[AuthToken] = None
    error_message: Optional[str] = None
    locked_until: Optional[datetime] = None
    failed_attempts: int = 0


class PasswordHasher:
    """PBKDF2-SHA256 hashes stored as ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.

    The iteration count travels with the hash so it can be raised later
    without invalidating existing accounts.
    """

    ALGORITHM = "pbkdf2_sha256"
    ITERATIONS = 100000

    @staticmethod
    def _digest(password: str, salt: str, iterations: int) -> str:
        return hashlib.pbkdf2_hmac(
            'sha256',
            password.encode('utf-8'),
            salt.encode('utf-8'),
            iterations
        ).hex()

    @classmethod
    def create_password_hash(cls, password: str) -> str:
        salt = secrets.token_hex(16)
        return "$".join((cls.ALGORITHM, str(cls.ITERATIONS), salt, cls._digest(password, salt, cls.ITERATIONS)))

    @classmethod
    def verify_password_hash(cls, password: str, password_hash: str) -> bool:
        """Constant-time check; malformed hashes never verify."""
        parts = password_hash.split('$')
        if len(parts) != 4 or parts[0] != cls.ALGORITHM or not parts[1].isdigit():
            return False
        _, iterations, salt, expected = parts
        return secrets.compare_digest(cls._digest(password, salt, int(iterations)), expected)
