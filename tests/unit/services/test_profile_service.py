"""Unit tests for ProfileService."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import (
    ConflictError,
    MemberTypeNotFoundError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from domain.entities.member_type import MemberType
from domain.entities.profile import Profile
from domain.entities.user import User
from domain.repositories.entity_store import RecordFilter
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork

PROFILE_FIELDS = {
    "member_type_id": "basic",
    "avatar": "avatar.png",
    "sex": "male",
    "birthday": 631152000,
    "country": "Norway",
    "street": "Karl Johans gate",
    "city": "Oslo",
}


@pytest.fixture
def service(uow: FakeUnitOfWork) -> ProfileService:
    return ProfileService(lambda: uow)


def _profile(user_id: UUID, **overrides: object) -> Profile:
    return Profile(user_id=user_id, **{**PROFILE_FIELDS, **overrides})  # type: ignore[arg-type]


def _user(user_id: UUID) -> User:
    return User(id=user_id, first_name="Ole", last_name="Nordmann", email="ole@example.com")


class TestCreate:
    @pytest.mark.asyncio
    async def test_creates_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = _user(user_id)
        uow.member_types.get.return_value = MemberType(id="basic", discount=0, month_posts_limit=20)
        uow.profiles.find_one.return_value = None
        uow.profiles.create.return_value = _profile(user_id)

        result = await service.create(user_id=user_id, **PROFILE_FIELDS)  # type: ignore[arg-type]

        assert result.user_id == user_id
        uow.profiles.find_one.assert_called_once_with(RecordFilter("user_id", user_id))
        uow.profiles.create.assert_called_once_with({"user_id": user_id, **PROFILE_FIELDS})
        assert uow.committed

    @pytest.mark.asyncio
    async def test_user_checked_before_member_type(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = None
        uow.member_types.get.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.create(user_id=user_id, **PROFILE_FIELDS)  # type: ignore[arg-type]

        uow.member_types.get.assert_not_called()
        uow.profiles.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_member_type_checked_before_uniqueness(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = _user(user_id)
        uow.member_types.get.return_value = None
        uow.profiles.find_one.return_value = _profile(user_id)

        with pytest.raises(MemberTypeNotFoundError) as exc_info:
            await service.create(user_id=user_id, **{**PROFILE_FIELDS, "member_type_id": "gold"})  # type: ignore[arg-type]

        assert exc_info.value.status_code == 404
        uow.profiles.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_rejects_second_profile(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.users.get.return_value = _user(user_id)
        uow.member_types.get.return_value = MemberType(id="basic", discount=0, month_posts_limit=20)
        uow.profiles.find_one.return_value = _profile(user_id)

        with pytest.raises(ProfileAlreadyExistsError) as exc_info:
            await service.create(user_id=user_id, **PROFILE_FIELDS)  # type: ignore[arg-type]

        assert isinstance(exc_info.value, ConflictError)
        assert exc_info.value.status_code == 400
        uow.profiles.create.assert_not_called()
        assert not uow.committed


class TestUpdate:
    @pytest.mark.asyncio
    async def test_updates_fields(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        profile = _profile(user_id)
        uow.profiles.get.return_value = profile
        uow.profiles.change.return_value = _profile(user_id, city="Bergen")

        result = await service.update(profile.id, city="Bergen")

        assert result.city == "Bergen"
        uow.profiles.change.assert_called_once_with(profile.id, {"city": "Bergen"})
        uow.member_types.get.assert_not_called()
        assert uow.committed

    @pytest.mark.asyncio
    async def test_checks_new_member_type(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        profile = _profile(user_id)
        uow.profiles.get.return_value = profile
        uow.member_types.get.return_value = None

        with pytest.raises(MemberTypeNotFoundError):
            await service.update(profile.id, member_type_id="platinum")

        uow.profiles.change.assert_not_called()

    @pytest.mark.asyncio
    async def test_switches_member_type(
        self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID
    ):
        profile = _profile(user_id)
        uow.profiles.get.return_value = profile
        uow.member_types.get.return_value = MemberType(
            id="business", discount=5, month_posts_limit=100
        )
        uow.profiles.change.return_value = _profile(user_id, member_type_id="business")

        await service.update(profile.id, member_type_id="business")

        uow.member_types.get.assert_called_once_with("business")
        uow.profiles.change.assert_called_once_with(profile.id, {"member_type_id": "business"})

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.update(uuid4(), city="Bergen")


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_profile(self, service: ProfileService, uow: FakeUnitOfWork, user_id: UUID):
        profile = _profile(user_id)
        uow.profiles.get.return_value = profile
        uow.profiles.delete.return_value = profile

        result = await service.delete(profile.id)

        assert result is profile
        uow.profiles.delete.assert_called_once_with(profile.id)
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: ProfileService, uow: FakeUnitOfWork):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.delete(uuid4())

        uow.profiles.delete.assert_not_called()
