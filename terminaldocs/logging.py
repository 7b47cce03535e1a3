"""Logger hierarchy shared by the landing and inject goals.

Every module logs through ``terminaldocs.<area>`` (``discovery``, ``landing``,
``styles.injector`` ...). The CLI calls :func:`configure_logging` once per run;
library callers that never do so get records through normal propagation.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "terminaldocs"
_CONSOLE_FORMAT = "[terminaldocs] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``terminaldocs.<name>``, or the package logger when *name* is empty."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route terminaldocs records to stderr and, with ``--log-file``, to a file.

    Console output goes to stderr so stdout only carries the per-goal summary
    lines printed by the CLI. ``--verbose`` lowers the level to DEBUG, which
    adds per-page decisions (already styled, no ``</head>``, report lookups).
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers or leak log files.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
