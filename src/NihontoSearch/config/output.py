"""`output` section: which writers run and where files go."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from NihontoSearch.config.common import Section

OUTPUT_FORMATS = ("console", "json")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    section = Section.of(raw, "output")
    return OutputConfig(
        base_dir=section.text("base_dir", "output"),
        formats=tuple(dict.fromkeys(section.words("formats"))),
    )


def check_output(config: OutputConfig) -> None:
    """Raise `ValueError` when `formats` is empty or names an unknown writer."""
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = [f for f in config.formats if f not in OUTPUT_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown values {unknown}; known: {', '.join(OUTPUT_FORMATS)}")
    if "json" in config.formats and not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty when output.formats includes json")
