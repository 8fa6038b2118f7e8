"""Shared utility functions for ``liveapp init``.

Provides Rich-based console reporting and the JSON I/O used to patch a
template's configuration files.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Mapping

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .errors import ConfigParseError

console = Console()
error_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load a JSON file whose top level is an object.

    Key order is preserved so a rewritten file keeps the template's layout.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.

    Raises:
        OSError: If the file cannot be read.
        ConfigParseError: If the content is not valid JSON or not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(file_path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ConfigParseError(file_path, f"expected an object, got {type(data).__name__}")
    return data


async def save_json(data: Mapping[str, Any], path: str | Path, indent: int = 4) -> None:
    """Save data as pretty-printed JSON.

    The write is performed in a worker thread, the same way every other
    filesystem step of the command runs.

    Args:
        data: Serialisable mapping.
        path: Destination file path. Its directory must already exist.
        indent: Spaces per indentation level.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a plain progress line."""
    console.print(message, markup=False, highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_options_table(data: Mapping[str, Any], title: str) -> None:
    """Print a two-column field/value table for an options mapping.

    Values are shown as their JSON encoding so ``""``, ``-1`` and booleans
    read exactly as they would be written.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan", min_width=len(title) + 4)
    table.add_column("Field", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, Text(json.dumps(value, ensure_ascii=False)))

    console.print(table)
