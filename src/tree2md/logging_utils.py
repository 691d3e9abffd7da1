"""Logging setup for the tree2md command line.

The library itself only creates module-level loggers; handlers are attached
here, by the entry point, never on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

SIMPLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: str, verbose: bool = False, trace: bool = False) -> int:
    """Pick the effective level from the command-line flags.

    ``trace`` wins over everything, then ``verbose`` (which only lowers the
    default WARNING level), then the explicit ``log_level`` name.

    Parameters
    ----------
    log_level : str
        Level name such as "INFO"; unknown names fall back to WARNING
    verbose : bool, default False
        Request DEBUG output when no explicit level was chosen
    trace : bool, default False
        Request DEBUG output with trace formatting

    Returns
    -------
    int
        Numeric logging level

    """
    if trace:
        return logging.DEBUG
    if verbose and log_level.upper() == "WARNING":
        return logging.DEBUG
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    if isinstance(log_level, str):
        log_level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(SIMPLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if log_file and len(handlers) > 1:
        root_logger.info("Logging to file: %s", log_file)
    return root_logger
