"""Subcommand modules for utilkit.

register_commands() imports each command lazily so ``utilkit --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every standalone command to the root CLI group."""
    from utilkit.commands.copy_cmd import copy_cmd
    from utilkit.commands.merge import merge
    from utilkit.commands.tree import tree
    from utilkit.commands.url import is_url_cmd

    cli.add_command(is_url_cmd)
    cli.add_command(merge)
    cli.add_command(tree)
    cli.add_command(copy_cmd)
