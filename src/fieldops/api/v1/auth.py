"""Authentication endpoints.

The access credential travels in the response body and the Authorization
header; the refresh credential only ever travels in an httpOnly cookie.
"""

from fastapi import APIRouter, Cookie, Response
from starlette.requests import Request

from src.fieldops.api.dependencies import AuthServiceDep, CurrentPrincipal
from src.fieldops.core.config import get_settings
from src.fieldops.core.rate_limit import limiter
from src.fieldops.schemas.auth import LoginRequest, LoginResponse, TokenResponse
from src.fieldops.schemas.common import ApiResponse
from src.fieldops.schemas.user import UserRead
from src.fieldops.services.auth_service import IssuedCredentials

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_refresh_cookie(response: Response, credentials: IssuedCredentials) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=credentials.refresh_token,
        max_age=settings.refresh_token_expire_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.app_env == "production",
        samesite="strict",
    )


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponse],
    responses={401: {"description": "Invalid credentials"}},
)
@limiter.limit(get_settings().login_rate_limit)
async def login(
    request: Request,
    response: Response,
    login_data: LoginRequest,
    service: AuthServiceDep,
) -> ApiResponse[LoginResponse]:
    """Authenticate by email and password; sets the refresh cookie."""
    credentials = await service.authenticate(login_data.email, login_data.password)
    _set_refresh_cookie(response, credentials)
    return ApiResponse(
        data=LoginResponse(
            user=UserRead.model_validate(credentials.user),
            access_token=credentials.access_token,
        ),
        message="Login successful",
    )


@router.post(
    "/refresh",
    response_model=ApiResponse[TokenResponse],
    responses={401: {"description": "Missing, invalid or expired refresh token"}},
)
async def refresh(
    response: Response,
    service: AuthServiceDep,
    refresh_token: str | None = Cookie(default=None, alias=get_settings().refresh_cookie_name),
) -> ApiResponse[TokenResponse]:
    """Mint a new access credential and rotate the refresh cookie."""
    credentials = await service.refresh(refresh_token)
    _set_refresh_cookie(response, credentials)
    return ApiResponse(data=TokenResponse(access_token=credentials.access_token))


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response) -> ApiResponse[None]:
    """Clear the refresh cookie. Access credentials simply expire."""
    response.delete_cookie(get_settings().refresh_cookie_name)
    return ApiResponse(message="Logged out successfully")


@router.get("/me", response_model=ApiResponse[UserRead])
async def me(principal: CurrentPrincipal, service: AuthServiceDep) -> ApiResponse[UserRead]:
    user = await service.current_user(principal)
    return ApiResponse(data=UserRead.model_validate(user))
