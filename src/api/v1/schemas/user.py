"""Pydantic schemas for User API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Base schema for User."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)


class UserCreate(UserBase):
    """Schema for creating a User."""

    model_config = ConfigDict(extra="forbid")


class UserUpdate(BaseModel):
    """Schema for updating a User. Subscriptions have their own endpoints."""

    model_config = ConfigDict(extra="forbid")

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=254)


class SubscriptionRequest(BaseModel):
    """Schema for subscribing to or unsubscribing from a user."""

    model_config = ConfigDict(extra="forbid")

    user_id: UUID = Field(..., description="The follower")


class UserResponse(BaseModel):
    """Schema for User response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "subscribed_to_user_ids": ["456e4567-e89b-12d3-a456-426614174000"],
            }
        },
    )

    id: UUID
    first_name: str
    last_name: str
    email: str
    subscribed_to_user_ids: list[UUID]


class UserListResponse(BaseModel):
    """Schema for list of Users."""

    data: list[UserResponse]


class UserDetailResponse(BaseModel):
    """Schema for single User."""

    data: UserResponse
