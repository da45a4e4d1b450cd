"""CLI package for NihontoSearch.

Split into the click surface (ui), component wiring (runner) and the
command logic itself (commands).
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from NihontoSearch.cli.runner import CommandRunner
from NihontoSearch.cli.ui import cli


def main() -> None:
    """Run NihontoSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
