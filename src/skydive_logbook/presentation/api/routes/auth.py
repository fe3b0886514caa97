"""Authentication endpoints for jumper accounts."""

from fastapi import APIRouter, Depends, Response, status

from skydive_logbook.application.services.auth_service import AuthenticationService
from skydive_logbook.domain.entities.jumper import Jumper
from skydive_logbook.domain.value_objects.auth import LoginCredentials, SignupData
from skydive_logbook.domain.value_objects.jump_statistics import JumpStatistics
from skydive_logbook.presentation.api.dependencies import get_auth_service
from skydive_logbook.presentation.api.middleware.auth import get_bearer_token, get_current_jumper
from skydive_logbook.presentation.api.schemas.logbook_schemas import (
    ApiResponse,
    ChangePasswordRequest,
    JumperProfileResponse,
    LoginResponse,
    SigninRequest,
    SignupRequest
)

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> JumperProfileResponse:
    """Create a jumper account."""
    jumper = await auth_service.signup(SignupData(
        email=request.email,
        password=request.password,
        name=request.name,
        license_number=request.license_number
    ))
    return JumperProfileResponse.from_jumper(jumper, JumpStatistics.from_jumps([]))


@router.post("/signin")
async def signin(
    request: SigninRequest,
    response: Response,
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> LoginResponse:
    """Authenticate with licence number and password and return an access token."""
    result = await auth_service.login(LoginCredentials(
        license_number=request.license_number,
        password=request.password
    ))

    if result.success and result.token:
        return LoginResponse(
            success=True,
            token=result.token.token,
            user_id=str(result.jumper_id),
            expires_at=result.token.expires_at
        )

    response.status_code = status.HTTP_401_UNAUTHORIZED
    response.headers["WWW-Authenticate"] = "Bearer"
    return LoginResponse(
        success=False,
        error_message=result.error_message,
        locked_until=result.locked_until,
        failed_attempts=result.failed_attempts
    )


@router.post("/logout")
async def logout(
    token: str = Depends(get_bearer_token),
    current_jumper: Jumper = Depends(get_current_jumper),
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> ApiResponse:
    """Logout by revoking the current token."""
    success = await auth_service.logout(token)
    return ApiResponse(
        success=success,
        message="Logged out successfully" if success else "Logout failed"
    )


@router.post("/change-password")
async def change_password(
    request: ChangePasswordRequest,
    response: Response,
    current_jumper: Jumper = Depends(get_current_jumper),
    auth_service: AuthenticationService = Depends(get_auth_service)
) -> ApiResponse:
    """Change the current jumper's password."""
    success = await auth_service.change_password(
        current_jumper.id,
        request.old_password,
        request.new_password
    )

    if success:
        return ApiResponse(success=True, message="Password changed successfully")

    response.status_code = status.HTTP_400_BAD_REQUEST
    return ApiResponse(
        success=False,
        message="Failed to change password. Please check your old password."
    )
