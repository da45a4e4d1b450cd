"""NihontoSearch logging utilities.

Library code only emits through the package logger `log`, which stays quiet
(NullHandler) until the CLI calls `configure_logging`. Lines look like

    10-17 09:30:12 [INFO] Query: 'bizen katana'
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATE_FORMAT: Final[str] = "%m-%d %H:%M:%S"

_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("NihontoSearch")
log.addHandler(logging.NullHandler())


def _resolve_level(level: str | None) -> int:
    value = logging.getLevelName((level or "INFO").upper())
    return value if isinstance(value, int) else logging.INFO


def _action_log_path(log_dir: str, action: str) -> Path:
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    return action_dir / f"{action}_{datetime.now().strftime('%m%d%H%M%S')}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """Install console (and optionally file) handlers on the package logger.

    Replaces whatever handlers a previous call installed. The console handler
    follows `level`; the file handler always records DEBUG so compiler stage
    traces end up in the per-action log.

    Args:
        level: Logging level name (e.g., INFO, DEBUG).
        action: CLI action name; names the log file directory.
        log_to_file: Whether to mirror logs to `<log_dir>/<action>/`.
        log_dir: Base directory for log files.

    Returns:
        Path of the log file, or None when not logging to a file.
    """
    _close_handlers()

    resolved = _resolve_level(level)
    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(resolved)
    console.setFormatter(formatter)
    log.addHandler(console)

    log_path: Path | None = None
    if log_to_file and action:
        log_path = _action_log_path(log_dir, action)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.setLevel(min(logging.DEBUG, resolved) if log_path else resolved)
    log.propagate = False
    return log_path


def _close_handlers() -> None:
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()


def reset_logging() -> None:
    """Close installed handlers and return the logger to its silent default."""
    _close_handlers()
    log.addHandler(logging.NullHandler())
    log.setLevel(logging.NOTSET)
    log.propagate = True
