"""Shared pytest fixtures for all tests."""

import pytest

from config import Config, get_default_seed_path
from db.store import DataStore
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration with no simulated latency.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        seed_path=get_default_seed_path(),
        log_level="DEBUG",
        log_dir=tmp_path / "tally" / "logs",
        fetch_latency_ms=0,
    )


@pytest.fixture
def empty_store(test_config):
    """Create a DataStore that starts with no records.

    Returns:
        DataStore: Store with all tables empty.
    """
    return DataStore(test_config, seed={})


@pytest.fixture
def services(test_config, empty_store):
    """Create a Services container over an empty store.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, store=empty_store)


@pytest.fixture
def seeded_services(test_config):
    """Create a Services container over the bundled seed data.

    Returns:
        Services: Services container seeded from db/seed/ledger.json.
    """
    return Services(test_config)
