"""Shared read/delete operations for the record services."""

from dataclasses import fields, replace
from typing import Callable, Dict, Tuple

from services.errors import NotFoundError
from logger import get_logger

logger = get_logger()


class RecordService:
    """Base class for services backed by one store table.

    Reads wait for the store's simulated latency and return snapshots:
    fresh tuples of frozen records, so later writes never show up in a
    collection a caller already holds.

    Subclasses set ``table`` (store table name) and ``entity`` (name used
    in errors and log messages).
    """

    table = ""
    entity = ""

    def __init__(self, store):
        """Initialize the service.

        Args:
            store: DataStore instance holding the collections.
        """
        self.store = store

    async def find_all(self) -> Tuple:
        """Get all records, ordered by id."""
        await self.store.simulate_latency()
        with self.store.connect() as tables:
            rows = tables[self.table]
            return tuple(rows[record_id] for record_id in sorted(rows))

    async def find(self, record_id: int):
        """Get a single record by ID.

        Returns:
            The record if found, None otherwise.
        """
        await self.store.simulate_latency()
        with self.store.connect() as tables:
            return tables[self.table].get(record_id)

    async def get(self, record_id: int):
        """Get a single record by ID.

        Raises:
            NotFoundError: If no record has this ID.
        """
        record = await self.find(record_id)
        if record is None:
            raise NotFoundError(self.entity, record_id)
        return record

    async def delete(self, record_id: int) -> bool:
        """Delete a record by ID.

        Returns:
            True if the record was deleted, False if not found.
        """
        await self.store.simulate_latency()
        with self.store.connect() as tables:
            if tables[self.table].pop(record_id, None) is None:
                return False

        logger.info(f"Deleted {self.entity.lower()} {record_id}")
        return True

    async def _select(self, predicate: Callable) -> Tuple:
        records = await self.find_all()
        return tuple(record for record in records if predicate(record))

    def _insert(self, build: Callable[[int], object]):
        """Store a new record built from the next free id."""
        with self.store.connect() as tables:
            record = build(self.store.next_id(self.table))
            tables[self.table][record.id] = record

        logger.info(f"Created {self.entity.lower()} {record.id}")
        return record

    def _current(self, record_id: int):
        with self.store.connect() as tables:
            record = tables[self.table].get(record_id)
        if record is None:
            raise NotFoundError(self.entity, record_id)
        return record

    def _store(self, record):
        with self.store.connect() as tables:
            if record.id not in tables[self.table]:
                raise NotFoundError(self.entity, record.id)
            tables[self.table][record.id] = record

        logger.info(f"Updated {self.entity.lower()} {record.id}")
        return record


def patch_fields(patch) -> Dict[str, object]:
    """Get the fields a patch sets (the ones that are not None)."""
    return {
        field.name: getattr(patch, field.name)
        for field in fields(patch)
        if getattr(patch, field.name) is not None
    }


def merge(record, changes: Dict[str, object]):
    """Return a copy of a frozen record with the changes applied."""
    return replace(record, **changes)
