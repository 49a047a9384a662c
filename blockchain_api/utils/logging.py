"""Logging configuration for applications using the client."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from structlog.stdlib import LoggerFactory
from structlog.types import Processor

from blockchain_api.models.config import ClientConfig

# Transport internals that log every connection at DEBUG
NOISY_LOGGERS = ("urllib3", "requests")


def _shared_processors() -> List[Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _has_file_handler(root: logging.Logger, log_path: Path) -> bool:
    target = os.path.abspath(log_path)
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler) and handler.baseFilename == target
        for handler in root.handlers
    )


def setup_logging(config: Optional[ClientConfig] = None) -> None:
    """
    Route structlog events through stdlib logging.

    Level, renderer and the optional rotating log file come from ``config``
    (read from the environment when omitted). Calling it again reconfigures
    structlog without attaching a second handler for the same file.
    """
    config = config or ClientConfig()
    level = getattr(logging, config.log_level.upper())

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)
    root = logging.getLogger()
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=_shared_processors() + [_renderer(config.log_format)],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if not config.log_file:
        return

    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    if _has_file_handler(root, log_path):
        return

    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=config.log_max_size_mb * 1024 * 1024,
        backupCount=config.log_backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    root.addHandler(file_handler)
