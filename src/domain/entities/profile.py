"""Profile domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for a user profile. One per user."""

    user_id: UUID
    member_type_id: str
    avatar: str
    sex: str
    birthday: int
    country: str
    street: str
    city: str
    id: UUID = field(default_factory=uuid4)
