"""Generic in-memory entity store."""

import copy
from collections.abc import Callable, Iterable, Mapping
from dataclasses import MISSING, fields, replace
from typing import Any, Generic, TypeVar
from uuid import uuid4

from core.exceptions import AppException, ValidationFailureError
from domain.repositories.entity_store import RecordFilter

T = TypeVar("T")


class InMemoryEntityStore(Generic[T]):
    """Ordered ``id -> record`` mapping for one dataclass entity type.

    Stored records are never mutated in place: ``change`` stores a new
    instance, and callers only ever receive deep copies. That keeps the
    transaction snapshot a shallow copy of the mapping.
    """

    def __init__(
        self,
        entity_type: type[T],
        not_found: Callable[[str], AppException],
        id_factory: Callable[[], Any] = uuid4,
    ) -> None:
        self._entity_type = entity_type
        self._not_found = not_found
        self._id_factory = id_factory
        self._records: dict[Any, T] = {}
        self._issued_ids: set[Any] = set()
        self._snapshot: dict[Any, T] | None = None

        entity_fields = fields(entity_type)  # type: ignore[arg-type]
        self._field_names = frozenset(f.name for f in entity_fields)
        self._required_fields = tuple(
            f.name
            for f in entity_fields
            if f.name != "id" and f.default is MISSING and f.default_factory is MISSING
        )

    @property
    def name(self) -> str:
        return self._entity_type.__name__

    async def find_many(self, filter: RecordFilter | None = None) -> list[T]:
        """Get all records matching the filter, in insertion order."""
        return [
            copy.deepcopy(record)
            for record in self._records.values()
            if filter is None or filter.matches(record)
        ]

    async def find_one(self, filter: RecordFilter) -> T | None:
        """Get the first matching record, or None."""
        for record in self._records.values():
            if filter.matches(record):
                return copy.deepcopy(record)
        return None

    async def get(self, id: Any) -> T | None:
        """Get a record by ID."""
        record = self._records.get(id)
        return copy.deepcopy(record) if record is not None else None

    async def create(self, fields: Mapping[str, Any]) -> T:
        """Create a record with a freshly generated ID."""
        self._check_fields(fields, action="create")
        missing = [name for name in self._required_fields if name not in fields]
        if missing:
            raise ValidationFailureError(
                f"Failed to create {self.name}: missing required fields: {', '.join(missing)}.",
                details={"missing_fields": missing},
            )

        record_id = self._id_factory()
        while record_id in self._issued_ids:
            record_id = self._id_factory()

        record = self._entity_type(id=record_id, **copy.deepcopy(dict(fields)))
        self._records[record_id] = record
        self._issued_ids.add(record_id)
        return copy.deepcopy(record)

    async def change(self, id: Any, fields: Mapping[str, Any]) -> T:
        """Merge fields into an existing record and return the new value."""
        current = self._records.get(id)
        if current is None:
            raise self._not_found(str(id))
        self._check_fields(fields, action="change")

        updated = replace(current, **copy.deepcopy(dict(fields)))  # type: ignore[type-var]
        self._records[id] = updated
        return copy.deepcopy(updated)

    async def delete(self, id: Any) -> T:
        """Remove a record and return it."""
        record = self._records.pop(id, None)
        if record is None:
            raise self._not_found(str(id))
        return record

    def populate(self, records: Iterable[T]) -> None:
        """Insert pre-built records, keeping their IDs."""
        for record in records:
            record_id = getattr(record, "id")
            self._records[record_id] = copy.deepcopy(record)
            self._issued_ids.add(record_id)

    def count(self) -> int:
        return len(self._records)

    def clear(self) -> None:
        self._records.clear()
        self._snapshot = None

    # Transaction hooks, driven by the unit of work.

    def begin(self) -> None:
        self._snapshot = dict(self._records)

    def commit(self) -> None:
        if self._snapshot is not None:
            self._snapshot = dict(self._records)

    def rollback(self) -> None:
        if self._snapshot is not None:
            self._records = dict(self._snapshot)

    def end(self) -> None:
        self._snapshot = None

    def _check_fields(self, fields: Mapping[str, Any], action: str) -> None:
        if "id" in fields:
            raise ValidationFailureError(
                f"Failed to {action} {self.name}: the id field is generated and cannot be set.",
                details={"invalid_fields": ["id"]},
            )
        unknown = sorted(set(fields) - self._field_names)
        if unknown:
            raise ValidationFailureError(
                f"Failed to {action} {self.name}: unknown fields: {', '.join(unknown)}.",
                details={"invalid_fields": unknown},
            )
