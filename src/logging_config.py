"""
Centralized logging configuration with rotating file handlers.

Console output carries user-facing progress; the rotating log file keeps
the detailed record of service requests, asset loads, and renders.

Usage:
    from src.logging_config import setup_logging
    setup_logging()  # Call once at application startup
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Log directory (relative to project root)
LOG_DIR = Path(__file__).parent.parent / "logs"

# Log format with function name and line number for debugging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation settings: 5 MB per file, keep 5 backups (25 MB total max)
MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

PACKAGE_LOGGER = "src.campus_paths"


def setup_logging(
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_dir: Path = LOG_DIR,
) -> None:
    """
    Configure logging with console and rotating file handlers.

    Sets up two logging outputs:
    - Console: Shows INFO and above (user-facing messages)
    - File: Shows DEBUG and above for the campus_paths package

    Args:
        console_level: Minimum log level for console output (default: INFO)
        file_level: Minimum log level for file output (default: DEBUG)
        log_dir: Directory for log files (default: logs/ in the project root)

    Example:
        # For verbose console output during debugging
        setup_logging(console_level=logging.DEBUG)
    """
    log_dir.mkdir(exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, let handlers filter

    # Clear any existing handlers (prevents duplicate logs on re-init)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler = RotatingFileHandler(
        log_dir / "campus_paths.log",
        maxBytes=MAX_LOG_SIZE_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)

    root_logger.info("Logging initialized - console: %s, file: %s",
                     logging.getLevelName(console_level),
                     logging.getLevelName(file_level))
