"""Command: list node ids of a JSON tree in pre-order."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    cls=UtilCommand,
    examples="""\
  utilkit tree menu.json
  utilkit -q tree menu.json
  utilkit --json tree menu.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def tree(app: AppContext, path: Path) -> None:
    """Print the ids of the tree in PATH, parents before children.

    PATH holds a JSON object with an "id" and an optional "children" list
    of objects of the same shape.
    """
    app.emit(app.documents.walk_tree(path))
