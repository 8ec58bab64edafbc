"""AppContext: shared Click context for all commands.

Built once by the root group and handed to subcommands through
``@click.pass_obj``. Owns logging setup and result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.config.logging import configure_logging
from utilkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from utilkit.config.settings import UtilkitSettings
    from utilkit.services.debounce import Debouncer
    from utilkit.services.documents import DocumentService
    from utilkit.services.result import ServiceResult


class AppContext:
    """Settings plus lazily created services."""

    def __init__(self, settings: UtilkitSettings) -> None:
        self.settings = settings
        self._documents: DocumentService | None = None
        self._debouncer: Debouncer | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def documents(self) -> DocumentService:
        if self._documents is None:
            from utilkit.services.documents import DocumentService

            self._documents = DocumentService(self.settings)
        return self._documents

    @property
    def debouncer(self) -> Debouncer:
        """Debouncer whose default wait comes from ``[debounce] wait_ms``."""
        if self._debouncer is None:
            from utilkit.services.debounce import Debouncer

            self._debouncer = Debouncer(self.settings)
        return self._debouncer

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Success goes to stdout; warnings go to stderr outside JSON mode.
        Failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            width=self.settings.output.width,
            indent=self.settings.output.indent,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
