"""Command runner for coordinating CLI execution.

Handles logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from NihontoSearch.cli.commands import CompileCommand
from NihontoSearch.config import AppConfig
from NihontoSearch.renderers import create_output_writer
from NihontoSearch.services import create_query_compiler
from NihontoSearch.tsquery.builder import is_valid_tsquery
from NihontoSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Each `run_*` method configures logging for its action, builds the
    components it needs from config and turns any failure into `click.Abort`.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def _configure_logging(self, action: str) -> None:
        log_path = configure_logging(
            level=self.config.log.level,
            action=action,
            log_to_file=self.config.log.to_file,
            log_dir=self.config.log.dir,
        )
        if log_path:
            log.debug("Logging to %s", log_path)

    def run_compile(self, action: str, queries: Sequence[str]) -> None:
        """Compile queries and write the plans to the configured outputs.

        Args:
            action: The CLI command name (e.g., 'compile').
            queries: Raw search box strings.

        Raises:
            click.Abort: When compiling or writing output fails.
        """
        self._configure_logging(action)
        try:
            output_writer = create_output_writer(self.config)
            command = CompileCommand(
                compiler=create_query_compiler(self.config),
                output_writer=output_writer,
                queries=queries,
                max_query_length=self.config.search.max_query_length,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Compile failed: %s", e)
            raise click.Abort from e

    def run_validate(self, action: str, query: str) -> bool:
        """Check a tsquery string for structural problems.

        Args:
            action: The CLI command name.
            query: tsquery text to check.

        Returns:
            Whether the query is well formed.
        """
        self._configure_logging(action)
        valid = is_valid_tsquery(query)
        if valid:
            log.info("valid: %s", query)
        else:
            log.error("invalid: %s", query)
        return valid
