"""Pydantic schemas for Profile API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileCreate(BaseModel):
    """Schema for creating a Profile."""

    model_config = ConfigDict(extra="forbid")

    user_id: UUID
    member_type_id: str = Field(..., min_length=1)
    avatar: str
    sex: str
    birthday: int
    country: str
    street: str
    city: str


class ProfileUpdate(BaseModel):
    """Schema for updating a Profile. The owning user cannot change."""

    model_config = ConfigDict(extra="forbid")

    member_type_id: str | None = Field(None, min_length=1)
    avatar: str | None = None
    sex: str | None = None
    birthday: int | None = None
    country: str | None = None
    street: str | None = None
    city: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    member_type_id: str
    avatar: str
    sex: str
    birthday: int
    country: str
    street: str
    city: str


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
