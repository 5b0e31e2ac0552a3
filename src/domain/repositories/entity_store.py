"""Generic entity store protocol."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RecordFilter:
    """Match records whose ``key`` field equals ``equals``.

    For list fields the match is containment: every expected value must be
    present in the record's list. A scalar expected value is treated as a
    one-element list.
    """

    key: str
    equals: Any

    def matches(self, record: object) -> bool:
        value = getattr(record, self.key, None)
        if isinstance(value, list):
            expected = self.equals if isinstance(self.equals, (list, tuple, set)) else [self.equals]
            return all(item in value for item in expected)
        return bool(value == self.equals)


class IEntityStore(Protocol[T]):
    """Keyed record store for one entity type.

    Performs no cross-entity validation. Guarantees at most one record per
    id and insertion-ordered iteration.
    """

    async def find_many(self, filter: RecordFilter | None = None) -> list[T]:
        """Get all records matching the filter, in insertion order."""
        ...

    async def find_one(self, filter: RecordFilter) -> T | None:
        """Get the first matching record, or None."""
        ...

    async def get(self, id: Any) -> T | None:
        """Get a record by ID."""
        ...

    async def create(self, fields: Mapping[str, Any]) -> T:
        """Create a record with a freshly generated ID."""
        ...

    async def change(self, id: Any, fields: Mapping[str, Any]) -> T:
        """Merge fields into an existing record and return it."""
        ...

    async def delete(self, id: Any) -> T:
        """Remove a record and return it."""
        ...

    def populate(self, records: Iterable[T]) -> None:
        """Insert pre-built records, keeping their IDs."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...
