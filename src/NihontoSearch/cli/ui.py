"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from NihontoSearch.cli.runner import CommandRunner
from NihontoSearch.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="NihontoSearch: compile search box text into filters and a tsquery.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="YAML file merged over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    default_path = DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else config_path
    ctx.obj = load_config_with_defaults(config_path, default_path=default_path)


@cli.command("compile")
@click.argument("queries", nargs=-1)
@click.pass_context
def compile_cmd(ctx: click.Context, queries: tuple[str, ...]) -> None:
    """Compile QUERIES (or the configured `queries`) and write the plans.

    Args:
        ctx: Click context.
        queries: Search box strings given on the command line.

    Raises:
        click.UsageError: When no query is given and none is configured.
        click.Abort: When compiling fails.
    """
    cfg = ctx.obj
    selected = list(queries) or list(cfg.search.queries)
    if not selected:
        raise click.UsageError("No queries given and none configured under `queries`.")
    CommandRunner(cfg).run_compile(action=ctx.command.name, queries=selected)


@cli.command("validate")
@click.argument("tsquery")
@click.pass_context
def validate_cmd(ctx: click.Context, tsquery: str) -> None:
    """Check TSQUERY for structural problems; exit status 1 when malformed."""
    if not CommandRunner(ctx.obj).run_validate(action=ctx.command.name, query=tsquery):
        ctx.exit(1)
