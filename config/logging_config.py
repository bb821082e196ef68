"""Logging configuration for the caption service."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

# Set once per process; uvicorn reloads and test runs call setup repeatedly
_logging_configured = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    module_name: str,
    log_dir: str = "logs",
    log_file: str = "app.log",
    level: Union[int, str] = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure root logging with a rotating file and stdout.

    Args:
        module_name: Subdirectory for logs (e.g., "api", "client")
        log_dir: Base logs directory
        log_file: Log file name
        level: Logging level, as int or name ("INFO", "debug")
        max_bytes: Max file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured root logger
    """
    global _logging_configured

    root_logger = logging.getLogger()
    if _logging_configured:
        return root_logger

    numeric_level = _resolve_level(level)
    log_path = Path(log_dir) / module_name
    log_path.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    # UTF-8 so captions in CJK languages survive in the log file
    file_handler = RotatingFileHandler(
        log_path / log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(numeric_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(stream=sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8", errors="replace")
        except (AttributeError, OSError):
            pass

    root_logger.setLevel(numeric_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    _logging_configured = True
    return root_logger
