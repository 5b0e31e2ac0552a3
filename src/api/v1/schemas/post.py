"""Pydantic schemas for Post API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a Post."""

    model_config = ConfigDict(extra="forbid")

    user_id: UUID
    title: str = Field(..., min_length=1, max_length=500)
    content: str


class PostUpdate(BaseModel):
    """Schema for updating a Post."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=500)
    content: str | None = None


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    title: str
    content: str


class PostListResponse(BaseModel):
    """Schema for list of Posts."""

    data: list[PostResponse]


class PostDetailResponse(BaseModel):
    """Schema for single Post."""

    data: PostResponse
