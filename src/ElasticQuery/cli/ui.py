"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from ElasticQuery.cli.runner import CommandRunner
from ElasticQuery.config import load_config
from ElasticQuery.config.app import DEFAULT_CONFIG_PATH


@click.group(help="ElasticQuery: compose Elasticsearch requests from YAML and run them.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading the config,
    so ``ELASTICSEARCH_URL`` can be set there.
    """
    load_dotenv()
    ctx.obj = load_config(config_path)


@cli.command("build")
@click.pass_context
def build_cmd(ctx: click.Context) -> None:
    """Print the composed request body without sending it."""
    CommandRunner(ctx.obj).run_build(action=ctx.command.name)


@cli.command("search")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for hits.",
)
@click.pass_context
def search_cmd(ctx: click.Context, output_format: str) -> None:
    """Run the configured request against the cluster and print the hits.

    Raises:
        click.Abort: When the search fails.
    """
    CommandRunner(ctx.obj).run_search(action=ctx.command.name, output_format=output_format)
