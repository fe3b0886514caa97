"""
Authentication dependencies for the skydive logbook API.

Endpoints that touch a jumper's logbook, favourites or profile depend on
get_current_jumper, which resolves the bearer token through the
authentication service (signature, expiry and revocation).
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from ....application.services.auth_service import AuthenticationService
from ....domain.entities.jumper import Jumper
from ..dependencies import get_auth_service


# Security scheme for bearer token authentication
security = HTTPBearer(auto_error=False)


class AuthenticationError(Exception):
    """Raised when authentication fails."""
    pass


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> str:
    """
    FastAPI dependency returning the raw bearer token.

    Raises:
        AuthenticationError: If the Authorization header is missing or not a bearer token
    """
    if not credentials or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return credentials.credentials


async def get_current_jumper(
    token: str = Depends(get_bearer_token),
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> Jumper:
    """
    FastAPI dependency to get the current authenticated jumper.

    Returns:
        Jumper: The authenticated jumper

    Raises:
        AuthenticationError: If the token is invalid, expired or revoked
    """
    jumper = await auth_service.validate_token(token)
    if not jumper:
        raise AuthenticationError("Invalid or expired token")
    return jumper


async def get_optional_jumper(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> Optional[Jumper]:
    """Resolve the jumper when a valid bearer token is sent, None otherwise."""
    if not credentials or not credentials.credentials:
        return None
    return await auth_service.validate_token(credentials.credentials)
