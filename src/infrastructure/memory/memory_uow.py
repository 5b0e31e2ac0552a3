"""In-memory Unit of Work implementation."""

from typing import Any, Optional

import structlog

from infrastructure.memory.database import InMemoryDatabase
from infrastructure.memory.entity_store import InMemoryEntityStore

logger = structlog.get_logger()


class InMemoryUnitOfWork:
    """Unit of Work over an ``InMemoryDatabase``.

    Entering acquires the database lock and snapshots every collection.
    Anything not committed when the context exits, including changes made
    before an exception, is reverted.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._database = database
        self._active = False

    def _store(self, store: InMemoryEntityStore) -> InMemoryEntityStore:  # type: ignore[type-arg]
        if not self._active:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return store

    @property
    def users(self) -> InMemoryEntityStore:  # type: ignore[type-arg]
        """Get user store."""
        return self._store(self._database.users)

    @property
    def profiles(self) -> InMemoryEntityStore:  # type: ignore[type-arg]
        """Get profile store."""
        return self._store(self._database.profiles)

    @property
    def posts(self) -> InMemoryEntityStore:  # type: ignore[type-arg]
        """Get post store."""
        return self._store(self._database.posts)

    @property
    def member_types(self) -> InMemoryEntityStore:  # type: ignore[type-arg]
        """Get member type store."""
        return self._store(self._database.member_types)

    async def commit(self) -> None:
        """Keep all changes made so far."""
        for store in self._database.stores:
            store.commit()

    async def rollback(self) -> None:
        """Revert to the state at entry or at the last commit."""
        for store in self._database.stores:
            store.rollback()

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        """Enter the context manager, taking the lock and a snapshot."""
        await self._database.lock.acquire()
        for store in self._database.stores:
            store.begin()
        self._active = True
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager, discarding uncommitted changes."""
        try:
            if exc_type:
                logger.debug("unit_of_work_rolled_back", error_type=exc_type.__name__)
            await self.rollback()
        finally:
            for store in self._database.stores:
                store.end()
            self._active = False
            self._database.lock.release()
