"""Project-wide logger for purefn.

Log records go to stderr so they never interleave with the example table the
CLI prints on stdout.
"""

import logging
import os
import sys
import typing as tp

__all__ = ["logger", "setup_logger", "resolve_level"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Turn a level name into a ``logging`` constant.

    Falls back to ``PUREFN_LOG_LEVEL``, then ``LOG_LEVEL``, then INFO.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    name = (level or os.getenv("PUREFN_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO")
    value = logging.getLevelName(name.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {name!r}")
    return value


def setup_logger(
    name: str = "purefn",
    level: str | None = None,
    stream: tp.TextIO | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        level: Log level name; see :func:`resolve_level` for the fallbacks
        stream: Destination stream, stderr by default

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Attach a handler only on first use so repeated imports don't duplicate output
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


logger = setup_logger()
