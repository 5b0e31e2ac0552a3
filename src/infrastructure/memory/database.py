"""In-memory database holding one store per entity collection."""

import asyncio

from core.exceptions import (
    MemberTypeNotFoundError,
    PostNotFoundError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from domain.entities.member_type import DEFAULT_MEMBER_TYPES, MemberType
from domain.entities.post import Post
from domain.entities.profile import Profile
from domain.entities.user import User
from infrastructure.memory.entity_store import InMemoryEntityStore


class InMemoryDatabase:
    """Process-lifetime store for users, profiles, posts and member types.

    ``lock`` serialises every unit of work, so a multi-step mutation such as
    the user delete cascade never interleaves with another operation.
    """

    def __init__(self, seed_member_types: bool = True) -> None:
        self.users: InMemoryEntityStore[User] = InMemoryEntityStore(User, UserNotFoundError)
        self.profiles: InMemoryEntityStore[Profile] = InMemoryEntityStore(
            Profile, ProfileNotFoundError
        )
        self.posts: InMemoryEntityStore[Post] = InMemoryEntityStore(Post, PostNotFoundError)
        self.member_types: InMemoryEntityStore[MemberType] = InMemoryEntityStore(
            MemberType, MemberTypeNotFoundError
        )
        self.lock = asyncio.Lock()

        if seed_member_types:
            self.member_types.populate(DEFAULT_MEMBER_TYPES)

    @property
    def stores(self) -> tuple[InMemoryEntityStore, ...]:  # type: ignore[type-arg]
        return (self.users, self.profiles, self.posts, self.member_types)

    def stats(self) -> dict[str, int]:
        """Record counts per collection."""
        return {
            "users": self.users.count(),
            "profiles": self.profiles.count(),
            "posts": self.posts.count(),
            "member_types": self.member_types.count(),
        }

    def clear(self) -> None:
        """Drop every record in every collection."""
        for store in self.stores:
            store.clear()
