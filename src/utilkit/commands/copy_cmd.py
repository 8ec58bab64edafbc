"""Command: deep-copy a JSON document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    "copy",
    cls=UtilCommand,
    examples="""\
  utilkit copy settings.json
  utilkit --json copy settings.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def copy_cmd(app: AppContext, path: Path) -> None:
    """Deep-copy the document in PATH and print the copy."""
    app.emit(app.documents.copy(path))
