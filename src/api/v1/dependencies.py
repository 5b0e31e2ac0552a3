"""Dependency injection factories for API v1."""

from typing import Callable

from fastapi import Depends, Request

from domain.services.member_type_service import MemberTypeService
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.memory.database import InMemoryDatabase
from infrastructure.memory.memory_uow import InMemoryUnitOfWork


def get_database(request: Request) -> InMemoryDatabase:
    """The database owned by the running application."""
    return request.app.state.database  # type: ignore[no-any-return]


def get_uow_factory(
    database: InMemoryDatabase = Depends(get_database),
) -> Callable[[], InMemoryUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> InMemoryUnitOfWork:
        return InMemoryUnitOfWork(database)

    return factory


def get_user_service(
    uow_factory: Callable[[], InMemoryUnitOfWork] = Depends(get_uow_factory),
) -> UserService:
    """Get User service instance."""
    return UserService(uow_factory)


def get_profile_service(
    uow_factory: Callable[[], InMemoryUnitOfWork] = Depends(get_uow_factory),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory)


def get_post_service(
    uow_factory: Callable[[], InMemoryUnitOfWork] = Depends(get_uow_factory),
) -> PostService:
    """Get Post service instance."""
    return PostService(uow_factory)


def get_member_type_service(
    uow_factory: Callable[[], InMemoryUnitOfWork] = Depends(get_uow_factory),
) -> MemberTypeService:
    """Get MemberType service instance."""
    return MemberTypeService(uow_factory)
