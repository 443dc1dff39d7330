"""
Output formatting for depcycle.

Renders the warnings and errors recorded on a finished Compilation.

Key Functions:
    format_result: Main entry point for formatting in any supported format
    to_json_bytes: JSON serialization using orjson
    format_text: Plain text, one block per entry plus a stats line
    render_highlight_console: Rich console output with colored entries

Example:
    >>> from depcycle.utils.formatter import format_result
    >>> from depcycle.core.types import OutputFormat
    >>> print(format_result(compilation, OutputFormat.TEXT))
"""

from __future__ import annotations

from typing import Any

import orjson
from rich.console import Console
from rich.text import Text

from ..core.compilation import Compilation
from ..core.types import OutputFormat


def entry_message(entry: Any) -> str:
    """Message of a warning/error entry, whatever a hook appended."""
    message = getattr(entry, "message", None)
    if isinstance(message, str):
        return message
    return str(entry)


def _entry_payload(entry: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": getattr(entry, "name", None) or type(entry).__name__,
        "message": entry_message(entry),
    }
    paths = getattr(entry, "paths", None)
    if paths is not None:
        payload["paths"] = list(paths)
    return payload


def _stats_line(compilation: Compilation) -> str:
    s = compilation.stats
    return (
        f"# modules={s.modules_total} eligible={s.modules_eligible} cycles={s.cycles_found} "
        f"warnings={len(compilation.warnings)} errors={len(compilation.errors)} "
        f"elapsed_ms={s.elapsed_ms:.2f}"
    )


def to_json_bytes(compilation: Compilation) -> bytes:
    payload = {
        "warnings": [_entry_payload(w) for w in compilation.warnings],
        "errors": [_entry_payload(e) for e in compilation.errors],
        "stats": compilation.stats.to_dict(),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_text(compilation: Compilation) -> str:
    out: list[str] = []
    for label, entries in (("WARNING", compilation.warnings), ("ERROR", compilation.errors)):
        for entry in entries:
            out.append(f"{label}: {entry_message(entry).replace(chr(13), '')}")
            out.append("")
    out.append(_stats_line(compilation))
    return "\n".join(out)


def render_highlight_console(compilation: Compilation, console: Console | None = None) -> None:
    """Render warnings and errors with colors to the console."""
    if console is None:
        console = Console()
    for style, label, entries in (
        ("yellow", "WARNING", compilation.warnings),
        ("bold red", "ERROR", compilation.errors),
    ):
        for entry in entries:
            console.print(Text(label, style=style), Text(entry_message(entry).replace("\r", "")))
            console.print()
    console.print(Text(_stats_line(compilation), style="dim"))


def format_result(compilation: Compilation, fmt: OutputFormat) -> str:
    """Format a finished pass according to the specified output format."""
    if fmt == OutputFormat.JSON:
        return to_json_bytes(compilation).decode("utf-8")
    # HIGHLIGHT falls back to plain text when not rendered on a console
    return format_text(compilation)
