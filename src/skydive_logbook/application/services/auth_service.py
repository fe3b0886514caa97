"""Authentication service for jumper accounts."""

from datetime import datetime, timedelta, timezone
from typing import Optional, TYPE_CHECKING
from uuid import UUID

from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.domain.value_objects.auth import (
    LoginCredentials,
    LoginResult,
    PasswordHasher,
    SignupData
)
from skydive_logbook.infrastructure.logging import (
    get_logger,
    log_authentication_attempt,
    log_business_rule_violation
)

if TYPE_CHECKING:
    from skydive_logbook.application.ports.repositories import JumperRepository, AuthTokenRepository
    from skydive_logbook.application.ports.security import TokenCodec


class AuthenticationService:
    """Service for jumper signup, login and token validation."""

    # Account lockout settings
    MAX_FAILED_ATTEMPTS = 5
    LOCKOUT_DURATION_HOURS = 1
    TOKEN_EXPIRY_HOURS = 8

    def __init__(
        self,
        jumper_repository: "JumperRepository",
        token_repository: "AuthTokenRepository",
        token_codec: "TokenCodec",
        token_expiry: Optional[timedelta] = None
    ):
        self._jumper_repository = jumper_repository
        self._token_repository = token_repository
        self._token_codec = token_codec
        self._token_expiry = token_expiry or timedelta(hours=self.TOKEN_EXPIRY_HOURS)
        self._logger = get_logger(__name__)

    async def signup(self, data: SignupData) -> Jumper:
        """Create a new jumper account.

        Raises:
            ValueError: If the licence number or email is already registered
        """
        license_number = data.license_number.strip().upper()

        if await self._jumper_repository.find_by_license_number(license_number):
            log_business_rule_violation(
                self._logger,
                "duplicate_license",
                f"Signup attempted with an already registered licence {license_number}"
            )
            raise ValueError("This licence number is already in use")

        if await self._jumper_repository.find_by_email(data.email):
            log_business_rule_violation(
                self._logger,
                "duplicate_email",
                "Signup attempted with an already registered email"
            )
            raise ValueError("This email is already in use")

        jumper = Jumper(
            email=data.email,
            name=data.name,
            license_number=license_number,
            password_hash=PasswordHasher.create_password_hash(data.password)
        )
        await self._jumper_repository.save(jumper)

        self._logger.info(f"Created jumper account {jumper.id} for licence {license_number}")
        return jumper

    async def login(self, credentials: LoginCredentials) -> LoginResult:
        """Authenticate a jumper and return login result."""
        license_number = credentials.normalized_license
        self._logger.info(f"Login attempt for licence: {license_number}")

        jumper = await self._jumper_repository.find_by_license_number(license_number)

        if not jumper:
            log_authentication_attempt(self._logger, license_number, False, failure_reason="license_not_found")
            return LoginResult(
                success=False,
                error_message="Licence number not found"
            )

        if jumper.is_locked():
            log_authentication_attempt(self._logger, license_number, False,
                                       failure_reason="account_locked",
                                       jumper_id=str(jumper.id))
            return LoginResult(
                success=False,
                error_message="Account is temporarily locked due to too many failed login attempts",
                locked_until=jumper.locked_until,
                failed_attempts=jumper.failed_login_attempts
            )

        if not PasswordHasher.verify_password_hash(credentials.password, jumper.password_hash):
            jumper.failed_login_attempts += 1

            if jumper.failed_login_attempts >= self.MAX_FAILED_ATTEMPTS:
                jumper.locked_until = datetime.now(timezone.utc) + timedelta(hours=self.LOCKOUT_DURATION_HOURS)
                await self._jumper_repository.save(jumper)
                self._logger.warning(
                    f"Account locked for jumper {jumper.id} after {jumper.failed_login_attempts} failed attempts"
                )
                log_authentication_attempt(self._logger, license_number, False,
                                           failure_reason="account_locked_after_failures",
                                           jumper_id=str(jumper.id),
                                           failed_attempts=jumper.failed_login_attempts)
                return LoginResult(
                    success=False,
                    error_message="Account locked due to too many failed login attempts",
                    locked_until=jumper.locked_until,
                    failed_attempts=jumper.failed_login_attempts
                )

            await self._jumper_repository.save(jumper)
            log_authentication_attempt(self._logger, license_number, False,
                                       failure_reason="invalid_password",
                                       jumper_id=str(jumper.id),
                                       failed_attempts=jumper.failed_login_attempts)
            return LoginResult(
                success=False,
                error_message="Incorrect password",
                failed_attempts=jumper.failed_login_attempts
            )

        # Successful login - reset lockout bookkeeping
        jumper.failed_login_attempts = 0
        jumper.locked_until = None
        jumper.last_login = datetime.now(timezone.utc)
        await self._jumper_repository.save(jumper)

        auth_token = self._token_codec.issue(jumper.id, self._token_expiry)
        await self._token_repository.save_token(auth_token)

        log_authentication_attempt(self._logger, license_number, True,
                                   jumper_id=str(jumper.id),
                                   token_expires_at=auth_token.expires_at.isoformat())

        return LoginResult(
            success=True,
            jumper_id=jumper.id,
            token=auth_token
        )

    async def validate_token(self, token: str) -> Optional[Jumper]:
        """Validate an access token and return its jumper if still valid."""
        try:
            jumper_id = self._token_codec.verify(token)
        except ValueError as e:
            self._logger.debug(f"Token rejected: {e}")
            return None

        auth_token = await self._token_repository.find_token(token)
        if not auth_token:
            self._logger.debug("Token not found in repository (revoked or never issued)")
            return None

        if auth_token.is_expired:
            self._logger.debug(f"Token expired for jumper {auth_token.jumper_id}")
            return None

        jumper = await self._jumper_repository.find_by_id(jumper_id)
        if not jumper:
            self._logger.warning(f"Jumper {jumper_id} not found for valid token")
            return None

        return jumper

    async def logout(self, token: str) -> bool:
        """Revoke an access token."""
        success = await self._token_repository.invalidate_token(token)
        if success:
            self._logger.info("Jumper logged out successfully")
        else:
            self._logger.warning("Logout failed - token not found or already invalid")
        return success

    async def change_password(self, jumper_id: UUID, old_password: str, new_password: str) -> bool:
        """Change a jumper's password."""
        if len(new_password) < 8:
            return False

        jumper = await self._jumper_repository.find_by_id(jumper_id)
        if not jumper:
            return False

        if not PasswordHasher.verify_password_hash(old_password, jumper.password_hash):
            return False

        jumper.password_hash = PasswordHasher.create_password_hash(new_password)
        await self._jumper_repository.save(jumper)
        return True

    async def get_profile(self, jumper_id: UUID) -> Optional[Jumper]:
        """Get a jumper profile by id."""
        return await self._jumper_repository.find_by_id(jumper_id)

    async def cleanup_expired_tokens(self) -> int:
        """Clean up expired authentication tokens."""
        return await self._token_repository.cleanup_expired_tokens()
