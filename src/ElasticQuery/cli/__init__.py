"""CLI package for ElasticQuery command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from ElasticQuery.cli.runner import CommandRunner
from ElasticQuery.cli.ui import cli


def main() -> None:
    """Run ElasticQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
