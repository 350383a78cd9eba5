"""Structured logging configuration using structlog."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from structlog.types import Processor

SIZE_UNITS = {"KB": 1024, "MB": 1024**2, "GB": 1024**3}


def build_processors(format_type: str = "structured") -> List[Processor]:
    """structlog processor chain ending in a JSON or console renderer."""
    processors: List[Processor] = [
        structlog.processors.TimeStamper(fmt="ISO"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if format_type == "plain":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def setup_logging(
    level: str = "INFO",
    format_type: str = "structured",
    file_enabled: bool = False,
    file_path: str = "data/stockscope.log",
    max_file_size: str = "10MB",
    backup_count: int = 5,
) -> None:
    """
    Route structlog through stdlib logging on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'structured' for JSON lines, 'plain' for console output
        file_enabled: Also write to a rotating log file
        file_path: Path to the log file
        max_file_size: Rotation size such as '10MB'
        backup_count: Number of rotated files to keep
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    structlog.configure(
        processors=build_processors(format_type),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if file_enabled:
        _add_file_handler(
            Path(file_path), parse_file_size(max_file_size), backup_count, log_level
        )


def _add_file_handler(
    log_file: Path, max_bytes: int, backup_count: int, log_level: int
) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=log_file, maxBytes=max_bytes, backupCount=backup_count
    )
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.getLogger().addHandler(handler)


def parse_file_size(size_str: str) -> int:
    """Parse '512', '10KB', '10MB' or '1GB' into bytes."""
    size_str = size_str.strip().upper()
    for suffix, multiplier in SIZE_UNITS.items():
        if size_str.endswith(suffix):
            return int(size_str[: -len(suffix)]) * multiplier
    return int(size_str)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally named after the calling module."""
    return structlog.get_logger(name)
