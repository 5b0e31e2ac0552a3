"""Post domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Post:
    """Domain entity for a Post."""

    user_id: UUID
    title: str
    content: str
    id: UUID = field(default_factory=uuid4)
