"""Member type service layer. Member types are read and updated only."""

from collections.abc import Callable

from core.exceptions import MemberTypeNotFoundError
from domain.entities.member_type import MemberType
from domain.repositories.unit_of_work import IUnitOfWork


class MemberTypeService:
    """Service layer for MemberType business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> list[MemberType]:
        async with self._uow_factory() as uow:
            return await uow.member_types.find_many()

    async def get_by_id(self, member_type_id: str) -> MemberType:
        async with self._uow_factory() as uow:
            member_type = await uow.member_types.get(member_type_id)
            if not member_type:
                raise MemberTypeNotFoundError(member_type_id)
            return member_type

    async def update(
        self,
        member_type_id: str,
        discount: float | None = None,
        month_posts_limit: int | None = None,
    ) -> MemberType:
        """Update the discount or monthly post limit of a member type."""
        async with self._uow_factory() as uow:
            member_type = await uow.member_types.get(member_type_id)
            if not member_type:
                raise MemberTypeNotFoundError(member_type_id)

            changes = {
                key: value
                for key, value in (
                    ("discount", discount),
                    ("month_posts_limit", month_posts_limit),
                )
                if value is not None
            }
            if not changes:
                return member_type

            updated = await uow.member_types.change(member_type_id, changes)
            await uow.commit()

            return updated
