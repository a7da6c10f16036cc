import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified vaultlift logging.

    Args:
        home: Path to the vaultlift home directory. If None, derived from environment.
        level: Level for the ``vaultlift`` root logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        from .get_home_dir import get_home_dir

        home = get_home_dir()

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILENAME

    root_logger = logging.getLogger("vaultlift")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``vaultlift`` hierarchy.

    Handlers are attached by configure_logging at the CLI entry point; library
    callers get plain propagation to whatever the host application configured.
    """
    return logging.getLogger(f"vaultlift.{name}")
