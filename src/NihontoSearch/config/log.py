"""`log` section: console level and the optional per-action log file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from NihontoSearch.config.common import Section

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Arguments for `configure_logging`.

    Attributes:
        level: Console level name, upper-cased.
        to_file: Mirror every record, DEBUG included, to `<dir>/<action>/`.
        dir: Base directory for log files.
    """

    level: str
    to_file: bool
    dir: str


def load_log(raw: Mapping[str, Any]) -> LogConfig:
    section = Section.of(raw, "log")
    return LogConfig(
        level=section.text("level").strip().upper(),
        to_file=section.flag("to_file", False),
        dir=section.text("dir", "log"),
    )


def check_log(config: LogConfig) -> None:
    """Raise `ValueError` for an unknown level or an empty log directory."""
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {', '.join(LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")
