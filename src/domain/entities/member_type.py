"""Member type domain entity."""

from dataclasses import dataclass
from enum import StrEnum


class MemberTypeId(StrEnum):
    """The fixed set of member types. Not creatable or deletable."""

    BASIC = "basic"
    BUSINESS = "business"


@dataclass
class MemberType:
    """Domain entity for a member type."""

    id: str
    discount: float
    month_posts_limit: int


DEFAULT_MEMBER_TYPES: tuple[MemberType, ...] = (
    MemberType(id=MemberTypeId.BASIC, discount=0, month_posts_limit=20),
    MemberType(id=MemberTypeId.BUSINESS, discount=5, month_posts_limit=100),
)
