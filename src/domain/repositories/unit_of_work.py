"""Unit of Work protocol."""

from typing import Protocol

from domain.entities.member_type import MemberType
from domain.entities.post import Post
from domain.entities.profile import Profile
from domain.entities.user import User
from domain.repositories.entity_store import IEntityStore


class IUnitOfWork(Protocol):
    """Unit of Work interface for serialising and reverting store operations."""

    users: IEntityStore[User]
    profiles: IEntityStore[Profile]
    posts: IEntityStore[Post]
    member_types: IEntityStore[MemberType]

    async def commit(self) -> None:
        """Keep all changes made so far."""
        ...

    async def rollback(self) -> None:
        """Revert to the state at entry or at the last commit."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
