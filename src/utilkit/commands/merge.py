"""Command: deep-merge two JSON documents."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand
from utilkit.domain.merge import ArrayMode

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    cls=UtilCommand,
    examples="""\
  utilkit merge defaults.json local.json
  utilkit merge defaults.json local.json --array-mode replace
  utilkit --json merge a.json b.json""",
)
@click.argument("base", type=click.Path(path_type=Path))
@click.argument("override", type=click.Path(path_type=Path))
@click.option(
    "--array-mode",
    type=click.Choice([m.value for m in ArrayMode]),
    default=None,
    help="How arrays are combined (default from config: merge).",
)
@click.pass_obj
def merge(app: AppContext, base: Path, override: Path, array_mode: str | None) -> None:
    """Merge OVERRIDE into BASE and print the result."""
    app.emit(app.documents.merge(base, override, array_mode=array_mode))
