"""
Loguru setup for WorkGraph.

The console sink is human readable; the optional file sink rotates daily
files under ``log_dir``. Records from the standard ``logging`` module
(uvicorn, FastAPI) are routed into loguru so the server writes one stream.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from workgraph.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[module]}:{line} - {message}"

STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")

logger.configure(extra={"module": "workgraph"})


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(module=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Configure sinks from a LoggingConfig.

    Replaces any sinks added earlier, so calling it again (for example on a
    second application startup in tests) does not duplicate output.

    Args:
        config: Logging section of the WorkGraph configuration; defaults apply when None
    """
    config = config or LoggingConfig()
    level = config.level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if config.log_to_file:
        log_path = Path(config.log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "workgraph_{time:YYYY-MM-DD}.log",
            level=level,
            format=FILE_FORMAT,
            rotation=config.file_rotation,
            retention=config.file_retention,
            compression=config.compression,
            serialize=config.serialize,
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in STDLIB_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True
        stdlib_logger.setLevel(level)


def get_logger(name: str):
    """Return the shared logger bound to a module name."""
    return logger.bind(module=name)
