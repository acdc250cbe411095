"""Command runner for coordinating CLI execution.

Manages logging configuration, component lifecycle and error handling for
command execution.
"""

from __future__ import annotations

import click

from ElasticQuery.cli.commands import BuildCommand, SearchCommand
from ElasticQuery.config import AppConfig
from ElasticQuery.services import create_document_manager
from ElasticQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_build(self, action: str) -> None:
        """Compose the configured request and print it.

        Raises:
            click.Abort: When composing fails.
        """
        self._configure_logging(action)
        try:
            BuildCommand(config=self.config, echo=click.echo).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Build failed: %s", e)
            raise click.Abort from e

    def run_search(self, action: str, output_format: str = "text") -> None:
        """Execute the configured search, always closing the HTTP session.

        Args:
            action: The CLI command name (e.g. 'search').
            output_format: ``text`` or ``json``.

        Raises:
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        try:
            document_manager = create_document_manager(self.config)
            try:
                SearchCommand(
                    config=self.config,
                    document_manager=document_manager,
                    echo=click.echo,
                    output_format=output_format,
                ).execute()
            finally:
                document_manager.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
