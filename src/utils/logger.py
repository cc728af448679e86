"""
Logging configuration

Modules grab a logger with ``setup_logger(__name__)`` at import time.
Entry points (the API app and the terminal client) call
``configure_logging`` once the configuration is loaded so that the
level and optional log file come from config rather than the environment.
"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import structlog


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure stdlib logging and structlog processors.

    Level falls back to the LOG_LEVEL environment variable, then INFO.
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False
    )


def setup_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Return a structured logger bound to ``name``."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
