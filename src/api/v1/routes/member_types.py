"""MemberType API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_member_type_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.member_type import (
    MemberTypeDetailResponse,
    MemberTypeListResponse,
    MemberTypeResponse,
    MemberTypeUpdate,
)
from core.rate_limit import limiter
from domain.services.member_type_service import MemberTypeService

router = APIRouter(prefix="/member-types", tags=["member-types"])


@router.get(
    "",
    response_model=MemberTypeListResponse,
    summary="List member types",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_member_types(
    request: Request,
    service: MemberTypeService = Depends(get_member_type_service),
) -> MemberTypeListResponse:
    """Get the fixed set of member types."""
    member_types = await service.get_all()
    return MemberTypeListResponse(
        data=[MemberTypeResponse.model_validate(mt) for mt in member_types]
    )


@router.get(
    "/{member_type_id}",
    response_model=MemberTypeDetailResponse,
    summary="Get a member type",
    responses={404: {"model": ErrorResponse, "description": "Member type not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_member_type(
    request: Request,
    member_type_id: str,
    service: MemberTypeService = Depends(get_member_type_service),
) -> MemberTypeDetailResponse:
    """Get a member type by ID (``basic`` or ``business``)."""
    member_type = await service.get_by_id(member_type_id)
    return MemberTypeDetailResponse(data=MemberTypeResponse.model_validate(member_type))


@router.patch(
    "/{member_type_id}",
    response_model=MemberTypeDetailResponse,
    summary="Update a member type",
    responses={404: {"model": ErrorResponse, "description": "Member type not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_member_type(
    request: Request,
    member_type_id: str,
    body: MemberTypeUpdate,
    service: MemberTypeService = Depends(get_member_type_service),
) -> MemberTypeDetailResponse:
    """Update the discount or monthly post limit."""
    member_type = await service.update(
        member_type_id,
        discount=body.discount,
        month_posts_limit=body.month_posts_limit,
    )
    return MemberTypeDetailResponse(data=MemberTypeResponse.model_validate(member_type))
