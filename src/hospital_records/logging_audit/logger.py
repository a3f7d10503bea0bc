"""Logging setup for the hospital-records command line.

One call to ``configure_logging`` per invocation installs two handlers on the
root logger: the console at the operator's level and a rotating log file that
keeps everything from DEBUG up. Both share the PII-redacting formatter so that
patient names and health numbers can be kept out of the logs.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .formatters import PIIRedactingFormatter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "hospital-records.log"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

# Handlers installed by the last configure_logging call
_installed_handlers: List[logging.Handler] = []


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_pii: bool = False,
) -> None:
    """Route log records to the console and to a rotating log file.

    Calling it again replaces the handlers from the previous call; handlers
    added by anything else are left alone.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path, ``logs/hospital-records.log`` when None
        redact_pii: Mask patient names and health numbers in both outputs

    Raises:
        ValueError: If level is not a logging level name

    Example:
        >>> configure_logging(level="DEBUG", log_file=Path("logs/desk.log"), redact_pii=True)
    """
    console_level = logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    root_logger = logging.getLogger()
    _remove_installed_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG)

    formatter = PIIRedactingFormatter(fmt=LOG_FORMAT, redact_pii=redact_pii)

    console = logging.StreamHandler()
    console.setLevel(console_level)
    _install(root_logger, console, formatter)

    log_path = Path(log_file) if log_file is not None else DEFAULT_LOG_FILE
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        root_logger.warning(f"Cannot write log file {log_path}: {e}. Logging to console only.")
        return
    log_file_handler.setLevel(logging.DEBUG)
    _install(root_logger, log_file_handler, formatter)


def _install(
    root_logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter
) -> None:
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    _installed_handlers.append(handler)


def _remove_installed_handlers(root_logger: logging.Logger) -> None:
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def get_logger(module_name: str) -> logging.Logger:
    return logging.getLogger(module_name)
