"""Human and JSON formatting of ServiceResult.

``--json`` dumps the result model verbatim. Human mode renders a status
line followed by an op-specific body; quiet mode keeps only the body.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.json import JSON
from rich.text import Text

from utilkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from utilkit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    width: int = 120
    indent: int = 2


def _render_urls(console: Console, data: dict[str, Any], settings: OutputSettings) -> None:
    for entry in data["results"]:
        style = "uk.true" if entry["is_url"] else "uk.false"
        line = Text()
        line.append("yes" if entry["is_url"] else "no ", style=style)
        line.append(f"  {entry['url']}")
        console.print(line, soft_wrap=True)


def _render_document(console: Console, data: dict[str, Any], settings: OutputSettings) -> None:
    document = JSON(_json.dumps(data["document"]), indent=settings.indent, highlight=False)
    console.print(document, soft_wrap=True)


def _render_tree(console: Console, data: dict[str, Any], settings: OutputSettings) -> None:
    for node_id in data["order"]:
        console.print(Text(str(node_id), style="uk.id"))


def _render_generic(console: Console, data: dict[str, Any], settings: OutputSettings) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text.assemble(("  " + str(key), "uk.key"), f": {value}"))


_RENDERERS: dict[str, Callable[[Console, dict[str, Any], OutputSettings], None]] = {
    "is_url": _render_urls,
    "merge": _render_document,
    "copy": _render_document,
    "tree": _render_tree,
}


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent)

    console = create_console(width=settings.width)
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "ERROR"
        console.print(Text.assemble(("ERROR", "uk.error"), f": {result.op} [{code}] {message}"))
        return get_output(console).rstrip("\n")

    if not settings.quiet:
        console.print(Text.assemble(("OK", "uk.ok"), ": ", (result.op, "uk.op")))
    renderer = _RENDERERS.get(result.op, _render_generic)
    if result.data:
        renderer(console, result.data, settings)
    return get_output(console).rstrip("\n")
