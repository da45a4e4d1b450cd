"""Output renderers for compiled query plans.

Exports the OutputWriter base for new output formats and a factory that
instantiates writers from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from NihontoSearch.renderers.base import MultiOutputWriter, OutputWriter
from NihontoSearch.renderers.console import ConsoleOutputWriter, render_text
from NihontoSearch.renderers.json import JsonFileWriter, render_json

if TYPE_CHECKING:
    from NihontoSearch.config import AppConfig


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A writer fanning out to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
