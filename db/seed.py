"""Seed data loading for the in-memory store."""

import json
from pathlib import Path
from typing import Dict, List

from models.account import Account
from models.budget import Budget
from models.category import Category
from models.transaction import Transaction
from logger import get_logger

logger = get_logger()

# Table name -> model used to parse its records
SEED_MODELS = {
    "accounts": Account,
    "categories": Category,
    "transactions": Transaction,
    "budgets": Budget,
}


def load_seed(path: Path) -> Dict[str, List]:
    """Load seed records from a JSON file.

    The file holds one list per table:
    {"accounts": [...], "categories": [...], "transactions": [...], "budgets": [...]}
    Missing tables are treated as empty.

    Args:
        path: Path to the seed JSON file.

    Returns:
        Dictionary mapping table name to a list of model objects.

    Raises:
        ValueError: If a record cannot be parsed or an id is repeated.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_seed(data)


def parse_seed(data: dict) -> Dict[str, List]:
    """Parse an already-decoded seed document into model objects."""
    result = {}
    for table, model in SEED_MODELS.items():
        records = []
        seen_ids = set()
        for index, raw in enumerate(data.get(table, [])):
            try:
                record = model.from_dict(raw)
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Invalid {table} record at index {index}: {e}") from e

            if record.id in seen_ids:
                raise ValueError(f"Duplicate id {record.id} in {table}")
            seen_ids.add(record.id)
            records.append(record)

        logger.debug(f"Loaded {len(records)} {table} from seed")
        result[table] = records

    return result
