"""Profile service layer with referential checks."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    MemberTypeNotFoundError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from domain.entities.profile import Profile
from domain.repositories.entity_store import RecordFilter
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        async with self._uow_factory() as uow:
            return await uow.profiles.find_many()

    async def get_by_id(self, profile_id: UUID) -> Profile:
        """Get a specific profile."""
        async with self._uow_factory() as uow:
            return await self._get_profile(uow, profile_id)

    async def create(
        self,
        user_id: UUID,
        member_type_id: str,
        avatar: str,
        sex: str,
        birthday: int,
        country: str,
        street: str,
        city: str,
    ) -> Profile:
        """Create a profile for an existing user.

        Checks run in a fixed order: the user exists, the member type
        exists, the user has no profile yet.
        """
        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                raise UserNotFoundError(str(user_id))

            if not await uow.member_types.get(member_type_id):
                raise MemberTypeNotFoundError(member_type_id)

            if await uow.profiles.find_one(RecordFilter("user_id", user_id)):
                raise ProfileAlreadyExistsError(str(user_id))

            created = await uow.profiles.create(
                {
                    "user_id": user_id,
                    "member_type_id": member_type_id,
                    "avatar": avatar,
                    "sex": sex,
                    "birthday": birthday,
                    "country": country,
                    "street": street,
                    "city": city,
                }
            )
            await uow.commit()

        logger.info("profile_created", profile_id=str(created.id), user_id=str(user_id))
        return created

    async def update(
        self,
        profile_id: UUID,
        member_type_id: str | None = None,
        avatar: str | None = None,
        sex: str | None = None,
        birthday: int | None = None,
        country: str | None = None,
        street: str | None = None,
        city: str | None = None,
    ) -> Profile:
        """Update an existing profile. A new member type must exist."""
        async with self._uow_factory() as uow:
            profile = await self._get_profile(uow, profile_id)

            if member_type_id is not None and member_type_id != profile.member_type_id:
                if not await uow.member_types.get(member_type_id):
                    raise MemberTypeNotFoundError(member_type_id)

            changes = {
                key: value
                for key, value in (
                    ("member_type_id", member_type_id),
                    ("avatar", avatar),
                    ("sex", sex),
                    ("birthday", birthday),
                    ("country", country),
                    ("street", street),
                    ("city", city),
                )
                if value is not None
            }
            if not changes:
                return profile

            updated = await uow.profiles.change(profile_id, changes)
            await uow.commit()

            return updated

    async def delete(self, profile_id: UUID) -> Profile:
        """Delete a profile and return it."""
        async with self._uow_factory() as uow:
            await self._get_profile(uow, profile_id)
            deleted = await uow.profiles.delete(profile_id)
            await uow.commit()

        logger.info("profile_deleted", profile_id=str(profile_id))
        return deleted

    async def _get_profile(self, uow: IUnitOfWork, profile_id: UUID) -> Profile:
        profile = await uow.profiles.get(profile_id)
        if not profile:
            raise ProfileNotFoundError(str(profile_id))
        return profile
