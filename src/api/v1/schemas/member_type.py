"""Pydantic schemas for MemberType API."""

from pydantic import BaseModel, ConfigDict, Field


class MemberTypeUpdate(BaseModel):
    """Schema for updating a MemberType."""

    model_config = ConfigDict(extra="forbid")

    discount: float | None = Field(None, ge=0, le=100)
    month_posts_limit: int | None = Field(None, ge=0)


class MemberTypeResponse(BaseModel):
    """Schema for MemberType response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {"id": "basic", "discount": 0, "month_posts_limit": 20},
        },
    )

    id: str
    discount: float
    month_posts_limit: int


class MemberTypeListResponse(BaseModel):
    """Schema for list of MemberTypes."""

    data: list[MemberTypeResponse]


class MemberTypeDetailResponse(BaseModel):
    """Schema for single MemberType."""

    data: MemberTypeResponse
