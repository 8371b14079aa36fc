"""Logging setup for the demo application and for scripts embedding the editors.

Library modules only create module loggers; handlers are installed here.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(
    *,
    log_level: int | str = logging.INFO,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> None:
    """Configure root logging with a single human readable stream handler.

    Args:
        log_level: Minimum log level, as a number or a name such as "DEBUG"
        stream: Stream to write to (default: sys.stderr)
        fmt: logging.Formatter format string
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(log_level))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    root_logger.addHandler(handler)
