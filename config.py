"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    seed_path: Path
    log_level: str
    log_dir: Path
    fetch_latency_ms: int = 250
    trend_months: int = 6
    recent_activity_size: int = 7
    default_currency: str = "USD"

    @property
    def fetch_latency(self) -> float:
        """Simulated fetch latency in seconds."""
        return max(self.fetch_latency_ms, 0) / 1000

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "tally"
        return cls(
            base_dir=base_dir,
            seed_path=get_default_seed_path(),
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def get_default_seed_path() -> Path:
    """Get the path to the bundled seed data.

    This is relative to the code location.
    """
    return Path(__file__).parent / "db" / "seed" / "ledger.json"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return _parse_config(data)


def _parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML, with defaults for any missing values."""
    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    data_config = data.get("data", {})
    seed_path = Path(data_config.get("seed_path", defaults.seed_path))
    fetch_latency_ms = int(
        data_config.get("fetch_latency_ms", defaults.fetch_latency_ms)
    )

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    dashboard_config = data.get("dashboard", {})

    return Config(
        base_dir=base_dir,
        seed_path=seed_path,
        log_level=log_level,
        log_dir=log_dir,
        fetch_latency_ms=fetch_latency_ms,
        trend_months=int(dashboard_config.get("trend_months", defaults.trend_months)),
        recent_activity_size=int(
            dashboard_config.get(
                "recent_activity_size", defaults.recent_activity_size
            )
        ),
        default_currency=dashboard_config.get(
            "default_currency", defaults.default_currency
        ),
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "data": {
            "seed_path": str(config.seed_path),
            "fetch_latency_ms": config.fetch_latency_ms,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "dashboard": {
            "trend_months": config.trend_months,
            "recent_activity_size": config.recent_activity_size,
            "default_currency": config.default_currency,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
