# === FILE: a11y_scout/logger.py ===
"""Project-wide logging configuration for **A11yScout**.

Highlights
----------
* Progress lines for the operator go to stdout through one named logger.
* Optional rotating log file next to the console output.
* Per-scan log file beside the output directory via :func:`scan_log`.
* Single, importable instance :data:`logger`::

      from a11y_scout.logger import logger
      logger.info("Scanning started")
* Re-configurable at runtime via :func:`configure`.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Iterator, Union

# --------------------------------------------------------------------------- #
# Constants & basic types                                                     #
# --------------------------------------------------------------------------- #

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "A11yScout"

_LevelT = Union[int, str]


# --------------------------------------------------------------------------- #
# Handler builders                                                            #
# --------------------------------------------------------------------------- #


def _stdout_handler(fmt: str) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    Path(file).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the global project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Path to a logfile. *None* → console-only output.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – drop existing handlers; *False* – append the new one(s).
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    lg.addHandler(_stdout_handler(log_format))

    if log_file is not None:
        lg.addHandler(_file_handler(log_file, log_format))

    lg.propagate = False
    return lg


def init_logging(level: _LevelT = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """Shortcut for :func:`configure` with handler replacement."""
    return configure(level=level, log_file=log_file, replace_handlers=True)


def scan_log_path(output_dir: str | Path) -> Path:
    """Log file of a scan: ``<output_dir>.log``, a sibling of the output directory.

    The file must stay outside *output_dir*: the directory's existence marks
    a previous scan.
    """
    output = Path(output_dir).expanduser().absolute()
    return output.with_name(f"{output.name}.log")


@contextmanager
def scan_log(output_dir: str | Path, *, log_format: str = DEFAULT_FORMAT) -> Iterator[Path]:
    """Mirror project log records into the scan's log file while the block runs."""
    path = scan_log_path(output_dir)
    lg = logging.getLogger(LOGGER_NAME)
    handler = _file_handler(path, log_format)
    lg.addHandler(handler)
    try:
        yield path
    finally:
        lg.removeHandler(handler)
        handler.close()


# --------------------------------------------------------------------------- #
# Ready-to-use instance                                                       #
# --------------------------------------------------------------------------- #

logger: logging.Logger = init_logging()

__all__ = [
    "logger",
    "configure",
    "init_logging",
    "scan_log",
    "scan_log_path",
    "LOGGER_NAME",
    "DEFAULT_FORMAT",
]
