"""Post service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

from core.exceptions import PostNotFoundError, UserNotFoundError
from domain.entities.post import Post
from domain.repositories.unit_of_work import IUnitOfWork


class PostService:
    """Service layer for Post business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[Post]:
        """Get all posts."""
        async with self._uow_factory() as uow:
            return await uow.posts.find_many()

    async def get_by_id(self, post_id: UUID) -> Post:
        """Get a specific post."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))
            return post

    async def create(self, user_id: UUID, title: str, content: str) -> Post:
        """Create a post owned by an existing user."""
        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                raise UserNotFoundError(str(user_id))

            created = await uow.posts.create(
                {"user_id": user_id, "title": title, "content": content}
            )
            await uow.commit()

            return created

    async def update(
        self,
        post_id: UUID,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Update an existing post."""
        async with self._uow_factory() as uow:
            post = await uow.posts.get(post_id)
            if not post:
                raise PostNotFoundError(str(post_id))

            changes = {
                key: value
                for key, value in (("title", title), ("content", content))
                if value is not None
            }
            if not changes:
                return post

            updated = await uow.posts.change(post_id, changes)
            await uow.commit()

            return updated

    async def delete(self, post_id: UUID) -> Post:
        """Delete a post and return it."""
        async with self._uow_factory() as uow:
            if not await uow.posts.get(post_id):
                raise PostNotFoundError(str(post_id))

            deleted = await uow.posts.delete(post_id)
            await uow.commit()

            return deleted
