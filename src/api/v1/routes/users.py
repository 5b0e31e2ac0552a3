"""User API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_user_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.user import (
    SubscriptionRequest,
    UserCreate,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from core.rate_limit import limiter
from domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=UserListResponse,
    summary="List all users",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Get all users in creation order."""
    users = await service.get_all()
    return UserListResponse(data=[UserResponse.model_validate(user) for user in users])


@router.get(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Get a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_user(
    request: Request,
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Get a specific user by ID."""
    user = await service.get_by_id(user_id)
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.get(
    "/{user_id}/followers",
    response_model=UserListResponse,
    summary="List a user's followers",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_followers(
    request: Request,
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Get every user subscribed to this user."""
    followers = await service.get_followers(user_id)
    return UserListResponse(data=[UserResponse.model_validate(user) for user in followers])


@router.post(
    "",
    response_model=UserDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={201: {"description": "User created successfully"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_user(
    request: Request,
    body: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Create a new user with an empty subscription list."""
    user = await service.create(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
    )
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.patch(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Update a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_user(
    request: Request,
    user_id: UUID,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Update a user's name or email."""
    user = await service.update(
        user_id=user_id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
    )
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.delete(
    "/{user_id}",
    response_model=UserDetailResponse,
    summary="Delete a user",
    responses={
        200: {"description": "User and dependent records deleted"},
        404: {"model": ErrorResponse, "description": "User not found"},
        412: {"model": ErrorResponse, "description": "A cascade step failed"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_user(
    request: Request,
    user_id: UUID,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Delete a user, its profile and posts, and drop it from every follower list."""
    user = await service.delete(user_id)
    return UserDetailResponse(data=UserResponse.model_validate(user))


@router.post(
    "/{user_id}/subscribe-to",
    response_model=UserDetailResponse,
    summary="Subscribe to a user",
    responses={
        400: {"model": ErrorResponse, "description": "Self or duplicate subscription"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def subscribe_to_user(
    request: Request,
    user_id: UUID,
    body: SubscriptionRequest,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Subscribe the body user to the path user. Returns the updated follower."""
    follower = await service.subscribe(follower_id=body.user_id, target_id=user_id)
    return UserDetailResponse(data=UserResponse.model_validate(follower))


@router.post(
    "/{user_id}/unsubscribe-from",
    response_model=UserDetailResponse,
    summary="Unsubscribe from a user",
    responses={
        400: {"model": ErrorResponse, "description": "Not subscribed"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def unsubscribe_from_user(
    request: Request,
    user_id: UUID,
    body: SubscriptionRequest,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Unsubscribe the body user from the path user. Returns the updated follower."""
    follower = await service.unsubscribe(follower_id=body.user_id, target_id=user_id)
    return UserDetailResponse(data=UserResponse.model_validate(follower))
