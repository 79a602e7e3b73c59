"""Logging utilities for Nibblefont."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call.
_installed_handlers: list[logging.Handler] = []


@dataclass
class ConversionStats:
    """Statistics from a pack or dump run."""

    source: str | None = None
    glyph_count: int = 0
    empty_glyphs: int = 0
    bytes_written: int = 0


def _parse_level(name: str) -> int:
    """Map a level name such as "info" to its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger

    Raises:
        ValueError: If a level name is not a known logging level
    """
    file_level_no = _parse_level(file_level)
    console_level_no = _parse_level(console_level)

    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"nibblefont_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_level_no)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    handlers: list[logging.Handler] = [file_handler]

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level_no)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = handlers
    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("nibblefont")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger
