"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileCreate,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpdate,
)
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get all profiles."""
    profiles = await service.get_all()
    return ProfileListResponse(
        data=[ProfileResponse.model_validate(profile) for profile in profiles]
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a specific profile by ID."""
    profile = await service.get_by_id(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"model": ErrorResponse, "description": "The user already has a profile"},
        404: {"model": ErrorResponse, "description": "User or member type not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the profile of an existing user. One profile per user."""
    profile = await service.create(**body.model_dump())
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.patch(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Update a profile",
    responses={404: {"model": ErrorResponse, "description": "Profile or member type not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: UUID,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Update profile details or switch member type."""
    profile = await service.update(profile_id, **body.model_dump())
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.delete(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Delete a profile",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: UUID,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Delete a profile and return it."""
    profile = await service.delete(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))
