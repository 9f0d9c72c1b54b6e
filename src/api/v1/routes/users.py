"""User API routes: registration, login, profile lookup and name changes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_identity_service, get_profile_service
from api.v1.schemas.common import DataResponse, ErrorResponse, MessageResponse
from api.v1.schemas.user import (
    LoginRequest,
    NameChangeRequest,
    NameChangeResponse,
    NameHistoryResponse,
    UserCreate,
    UserProfileResponse,
)
from core.config import settings
from core.rate_limit import credential_limit
from domain.services.identity_service import IdentityService
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "User and profile created"},
        400: {"model": ErrorResponse, "description": "Registration transaction failed"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
@credential_limit  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserCreate,
    service: IdentityService = Depends(get_identity_service),
) -> MessageResponse:
    """Create an account and its profile atomically."""
    await service.register(
        email=body.email,
        password=body.password,
        name=body.name,
        age=body.age,
        gender=body.gender,
        profile_image=body.profile_image,
    )
    return MessageResponse(message="Registration complete")


@router.post(
    "/login",
    response_model=MessageResponse,
    summary="Log in",
    responses={
        200: {"description": "Session cookie set"},
        401: {"model": ErrorResponse, "description": "Unknown email or wrong password"},
    },
)
@credential_limit  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    response: Response,
    body: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> MessageResponse:
    """Verify credentials and set the ``authorization`` session cookie."""
    issued = await service.authenticate(body.email, body.password)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=f"Bearer {issued.access_token}",
        max_age=issued.expires_in,
        secure=settings.session_cookie_secure,
        httponly=settings.session_cookie_httponly,
        samesite=settings.session_cookie_samesite,
    )
    return MessageResponse(message="Login successful")


@router.put(
    "/users/name",
    response_model=MessageResponse,
    summary="Change display name",
    responses={
        200: {"description": "Name changed and recorded"},
        400: {"model": ErrorResponse, "description": "Name change transaction failed"},
        401: {"model": ErrorResponse, "description": "Not logged in"},
        404: {"model": ErrorResponse, "description": "Caller has no profile"},
    },
)
async def change_name(
    body: NameChangeRequest,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Rename the caller's profile and append a name change record."""
    await service.change_name(user.id, body.name)
    return MessageResponse(message="Name changed")


@router.get(
    "/users/{user_id}",
    response_model=DataResponse[UserProfileResponse | None],
    summary="Get a user profile",
)
async def get_user(
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> DataResponse[UserProfileResponse | None]:
    """Get a user with its profile. ``data`` is null when the user does not exist."""
    profile = await service.get_profile(user_id)
    return DataResponse[UserProfileResponse | None](
        data=UserProfileResponse.model_validate(profile) if profile else None
    )


@router.get(
    "/users/{user_id}/name-history",
    response_model=NameHistoryResponse,
    summary="List name changes",
)
async def get_name_history(
    user_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> NameHistoryResponse:
    """Get a user's name changes, oldest first."""
    records = await service.get_name_history(user_id)
    return NameHistoryResponse(
        data=[NameChangeResponse.model_validate(record) for record in records]
    )
