"""User domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for a User.

    ``subscribed_to_user_ids`` is the outbound side of the subscription
    relation; followers of a user are derived by scanning these lists.
    """

    first_name: str
    last_name: str
    email: str
    id: UUID = field(default_factory=uuid4)
    subscribed_to_user_ids: list[UUID] = field(default_factory=list)

    def is_subscribed_to(self, user_id: UUID) -> bool:
        """Check whether this user follows ``user_id``."""
        return user_id in self.subscribed_to_user_ids
