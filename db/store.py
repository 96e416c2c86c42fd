"""In-memory data store holding the application's collections."""

import asyncio
from contextlib import contextmanager
from typing import Dict, List, Optional

from config import Config
from db.seed import SEED_MODELS, load_seed
from logger import get_logger

logger = get_logger()

TABLES = tuple(SEED_MODELS)


class DataStore:
    """Owns the collection state for accounts, categories, transactions and budgets.

    Records are frozen dataclasses kept in per-table dicts keyed by id. The
    tables are seeded lazily on first access, either from the explicit seed
    mapping or from the seed file named by the config.

    Args:
        config: Application configuration object.
        seed: Optional table name -> records mapping. If provided, the seed
              file is ignored.
    """

    def __init__(self, config: Config, seed: Optional[Dict[str, List]] = None):
        self.config = config
        self._seed = seed
        self._tables: Optional[Dict[str, Dict[int, object]]] = None

    @contextmanager
    def connect(self):
        """Get the store's tables.

        Yields:
            dict: Table name -> {id: record}.
        """
        if self._tables is None:
            self._tables = self._load()
        yield self._tables

    def next_id(self, table: str) -> int:
        """Get the next free id for a table (highest id plus one)."""
        with self.connect() as tables:
            return max(tables[table], default=0) + 1

    async def simulate_latency(self) -> None:
        """Wait for the configured fetch latency."""
        await asyncio.sleep(self.config.fetch_latency)

    def _load(self) -> Dict[str, Dict[int, object]]:
        if self._seed is not None:
            records = self._seed
        elif self.config.seed_path.exists():
            logger.debug(f"Seeding store from {self.config.seed_path}")
            records = load_seed(self.config.seed_path)
        else:
            logger.warning(
                f"Seed file not found: {self.config.seed_path}, starting empty"
            )
            records = {}

        return {
            table: {record.id: record for record in records.get(table, [])}
            for table in TABLES
        }
