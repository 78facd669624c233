"""Logging setup for the command line.

Library modules only ever call `logging.getLogger(__name__)`; handlers are
attached here, on the `oddments` package logger, by the CLI entry point.
"""

from __future__ import annotations
import logging
import logging.handlers
import sys
from typing import Optional

from .config import Settings


PACKAGE_LOGGER = "oddments"
LOG_FILE_NAME = "oddments.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_installed: list[logging.Handler] = []


def _file_handler(settings: Settings, formatter: logging.Formatter) -> Optional[logging.Handler]:
    """Rotating file handler (~1 MB per file, 3 backups), or None if disabled.

    Raises:
        OSError: the log directory or file cannot be created.
    """
    if not settings.file_logging or settings.log_dir is None:
        return None
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        settings.log_dir / LOG_FILE_NAME,
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console (and, if enabled, rotating file) handlers.

    Calling it again replaces the handlers installed by the previous call.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    for h in _installed:
        log.removeHandler(h)
        h.close()
    _installed.clear()

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    log.addHandler(console)
    _installed.append(console)
    log.setLevel(level)

    try:
        handler = _file_handler(settings, formatter)
    except OSError as ex:
        log.warning("File logging disabled: %s", ex)
        return log

    if handler is not None:
        log.addHandler(handler)
        _installed.append(handler)
        # the file wants DEBUG records even when the console does not
        log.setLevel(logging.DEBUG)
    return log
