"""Tests for configuration loading."""

from pathlib import Path

import pytest

from config import Config, get_default_seed_path, load_config


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


def test_default_config_is_written(home):
    """Test that a missing config file is created with defaults."""
    config = load_config()

    assert (home / ".config" / "tally.toml").exists()
    assert config.base_dir == home / "data" / "tally"
    assert config.log_dir == home / "data" / "tally" / "logs"
    assert config.seed_path == get_default_seed_path()
    assert config.fetch_latency_ms == 250
    assert config.trend_months == 6

    # Loading again reads the file just written
    assert load_config() == config


def test_custom_config(home):
    """Test that values from the TOML file override the defaults."""
    config_path = home / ".config" / "tally.toml"
    config_path.parent.mkdir(parents=True)
    config_path.write_text(
        f"""
base_dir = "{home / 'ledger'}"

[data]
seed_path = "{home / 'ledger.json'}"
fetch_latency_ms = 0

[logging]
level = "DEBUG"

[dashboard]
trend_months = 12
default_currency = "EUR"
"""
    )

    config = load_config()

    assert config.seed_path == home / "ledger.json"
    assert config.fetch_latency == 0
    assert config.log_level == "DEBUG"
    assert config.log_dir == home / "ledger" / "logs"
    assert config.trend_months == 12
    assert config.recent_activity_size == 7
    assert config.default_currency == "EUR"


def test_fetch_latency_in_seconds():
    """Test the latency conversion."""
    config = Config(
        base_dir=Path("/tmp"),
        seed_path=Path("/tmp/seed.json"),
        log_level="INFO",
        log_dir=Path("/tmp/logs"),
        fetch_latency_ms=1500,
    )

    assert config.fetch_latency == 1.5
