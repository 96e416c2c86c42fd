"""Logging configuration for Tally.

Reports are written through the logger, so the console shows plain report
lines while the dated log file keeps full records of every run.
"""

import logging
from datetime import date
from config import Config


class ConsoleFormatter(logging.Formatter):
    """Bare messages for report output, level-prefixed for problems."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    The file handler records at the configured level. The console never
    drops below INFO, since report lines are logged at INFO.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("tally")
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # One file per day: tally-{date}.log
    log_path = config.log_dir / f"tally-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(max(logger.level, logging.INFO))
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The tally logger instance.
    """
    return logging.getLogger("tally")
