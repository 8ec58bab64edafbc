"""Command: check whether strings are http(s) URLs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from utilkit.commands._base import UtilCommand

if TYPE_CHECKING:
    from utilkit.commands._context import AppContext


@click.command(
    "is-url",
    cls=UtilCommand,
    examples="""\
  utilkit is-url https://example.com
  utilkit is-url http:// https://a.example/b?c=1
  utilkit --json is-url https://example.com""",
)
@click.argument("urls", nargs=-1, required=True)
@click.pass_obj
def is_url_cmd(app: AppContext, urls: tuple[str, ...]) -> None:
    """Report which URLS are well-formed http(s) URLs."""
    app.emit(app.documents.check_urls(list(urls)))
