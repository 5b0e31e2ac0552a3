"""User service layer: CRUD, subscriptions and the delete cascade."""

import asyncio
from collections.abc import Callable
from enum import StrEnum
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadySubscribedError,
    AppException,
    CascadeStepFailedError,
    NotSubscribedError,
    SelfSubscriptionError,
    UserNotFoundError,
)
from domain.entities.user import User
from domain.repositories.entity_store import RecordFilter
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class UserDeletionStep(StrEnum):
    """Cascade steps of a user delete, reported on failure."""

    PROFILE = "profile"
    POSTS = "posts"
    FOLLOWERS = "followers"
    USER = "user"


class UserService:
    """Service layer for User business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[User]:
        """Get all users in creation order."""
        async with self._uow_factory() as uow:
            return await uow.users.find_many()

    async def get_by_id(self, user_id: UUID) -> User:
        """Get a specific user."""
        async with self._uow_factory() as uow:
            return await self._get_user(uow, user_id)

    async def get_followers(self, user_id: UUID) -> list[User]:
        """Get every user subscribed to ``user_id``."""
        async with self._uow_factory() as uow:
            await self._get_user(uow, user_id)
            return await uow.users.find_many(RecordFilter("subscribed_to_user_ids", user_id))

    async def create(self, first_name: str, last_name: str, email: str) -> User:
        """Create a new user with no subscriptions."""
        async with self._uow_factory() as uow:
            created = await uow.users.create(
                {"first_name": first_name, "last_name": last_name, "email": email}
            )
            await uow.commit()

        logger.info("user_created", user_id=str(created.id))
        return created

    async def update(
        self,
        user_id: UUID,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
    ) -> User:
        """Update an existing user's personal fields."""
        async with self._uow_factory() as uow:
            user = await self._get_user(uow, user_id)

            changes = {
                key: value
                for key, value in (
                    ("first_name", first_name),
                    ("last_name", last_name),
                    ("email", email),
                )
                if value is not None
            }
            if not changes:
                return user

            updated = await uow.users.change(user_id, changes)
            await uow.commit()

            return updated

    async def delete(self, user_id: UUID) -> User:
        """Delete a user together with everything that references it.

        The profile, the posts and the follower lists are cleaned up
        concurrently; the user record itself is removed only once all three
        succeeded. Any failure reverts the whole operation.
        """
        async with self._uow_factory() as uow:
            await self._get_user(uow, user_id)

            results = await asyncio.gather(
                self._delete_profile(uow, user_id),
                self._delete_posts(uow, user_id),
                self._detach_followers(uow, user_id),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    logger.warning(
                        "user_delete_cascade_failed",
                        user_id=str(user_id),
                        step=getattr(result, "step", None),
                        error=str(result),
                    )
                    raise result
            profile_deleted, posts_deleted, followers_updated = results

            try:
                deleted = await uow.users.delete(user_id)
            except AppException as exc:
                raise CascadeStepFailedError(str(user_id), UserDeletionStep.USER) from exc

            await uow.commit()

        logger.info(
            "user_deleted",
            user_id=str(user_id),
            profile_deleted=profile_deleted,
            posts_deleted=posts_deleted,
            followers_updated=followers_updated,
        )
        return deleted

    async def subscribe(self, follower_id: UUID, target_id: UUID) -> User:
        """Make ``follower_id`` follow ``target_id``. Returns the follower."""
        if follower_id == target_id:
            raise SelfSubscriptionError(str(follower_id))

        async with self._uow_factory() as uow:
            follower = await self._get_user(uow, follower_id)
            await self._get_user(uow, target_id)

            if follower.is_subscribed_to(target_id):
                raise AlreadySubscribedError(str(follower_id), str(target_id))

            updated = await uow.users.change(
                follower_id,
                {"subscribed_to_user_ids": [*follower.subscribed_to_user_ids, target_id]},
            )
            await uow.commit()

        logger.info("user_subscribed", follower_id=str(follower_id), target_id=str(target_id))
        return updated

    async def unsubscribe(self, follower_id: UUID, target_id: UUID) -> User:
        """Make ``follower_id`` stop following ``target_id``. Returns the follower."""
        async with self._uow_factory() as uow:
            follower = await self._get_user(uow, follower_id)
            await self._get_user(uow, target_id)

            if not follower.is_subscribed_to(target_id):
                raise NotSubscribedError(str(follower_id), str(target_id))

            updated = await uow.users.change(
                follower_id,
                {
                    "subscribed_to_user_ids": [
                        uid for uid in follower.subscribed_to_user_ids if uid != target_id
                    ]
                },
            )
            await uow.commit()

        logger.info("user_unsubscribed", follower_id=str(follower_id), target_id=str(target_id))
        return updated

    async def _get_user(self, uow: IUnitOfWork, user_id: UUID) -> User:
        user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user

    async def _delete_profile(self, uow: IUnitOfWork, user_id: UUID) -> bool:
        """Delete the user's profile, if any. Returns whether one existed."""
        profile = await uow.profiles.find_one(RecordFilter("user_id", user_id))
        if not profile:
            return False
        try:
            await uow.profiles.delete(profile.id)
        except AppException as exc:
            raise CascadeStepFailedError(str(user_id), UserDeletionStep.PROFILE) from exc
        return True

    async def _delete_posts(self, uow: IUnitOfWork, user_id: UUID) -> int:
        """Delete every post of the user. Returns the number deleted.

        All deletes are attempted; failed post IDs are reported together.
        """
        posts = await uow.posts.find_many(RecordFilter("user_id", user_id))
        outcomes = await asyncio.gather(
            *(uow.posts.delete(post.id) for post in posts),
            return_exceptions=True,
        )

        failures = [
            (post, outcome)
            for post, outcome in zip(posts, outcomes)
            if isinstance(outcome, BaseException)
        ]
        for _, outcome in failures:
            if not isinstance(outcome, AppException):
                raise outcome
        if failures:
            raise CascadeStepFailedError(
                str(user_id),
                UserDeletionStep.POSTS,
                {"failed_post_ids": [str(post.id) for post, _ in failures]},
            ) from failures[0][1]

        return len(posts)

    async def _detach_followers(self, uow: IUnitOfWork, user_id: UUID) -> int:
        """Remove ``user_id`` from every follower's list. Returns the count."""
        followers = await uow.users.find_many(RecordFilter("subscribed_to_user_ids", user_id))
        try:
            for follower in followers:
                await uow.users.change(
                    follower.id,
                    {
                        "subscribed_to_user_ids": [
                            uid for uid in follower.subscribed_to_user_ids if uid != user_id
                        ]
                    },
                )
        except AppException as exc:
            raise CascadeStepFailedError(str(user_id), UserDeletionStep.FOLLOWERS) from exc
        return len(followers)
