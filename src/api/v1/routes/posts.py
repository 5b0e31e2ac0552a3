"""Post API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_post_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
)
from core.rate_limit import limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=PostListResponse,
    summary="List all posts",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """Get all posts."""
    posts = await service.get_all()
    return PostListResponse(data=[PostResponse.model_validate(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: UUID,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get a specific post by ID."""
    post = await service.get_by_id(post_id)
    return PostDetailResponse(data=PostResponse.model_validate(post))


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={
        201: {"description": "Post created successfully"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Create a post owned by an existing user."""
    post = await service.create(
        user_id=body.user_id,
        title=body.title,
        content=body.content,
    )
    return PostDetailResponse(data=PostResponse.model_validate(post))


@router.patch(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Update a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_post(
    request: Request,
    post_id: UUID,
    body: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Update a post's title or content."""
    post = await service.update(post_id, title=body.title, content=body.content)
    return PostDetailResponse(data=PostResponse.model_validate(post))


@router.delete(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Delete a post",
    responses={404: {"model": ErrorResponse, "description": "Post not found"}},
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: UUID,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Delete a post and return it."""
    post = await service.delete(post_id)
    return PostDetailResponse(data=PostResponse.model_validate(post))
