"""Shared utility functions for the MVP scaffolder.

Provides name sanitisation, JSON/YAML context loading, the async writer that
persists a generated project to disk, and Rich-based console reporting.  The
planner and scaffolder never print; console output belongs to the CLI.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mvp_scaffold.models import GeneratedProject, InvalidContextError

console = Console()

# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Convert an arbitrary project name to a safe directory/package name.

    * Lowercases the input.
    * Replaces spaces and non-alphanumeric characters (except hyphens and
      underscores) with hyphens.
    * Collapses consecutive hyphens and strips leading/trailing hyphens.

    Examples::

        sanitize_name("Review Analyzer") -> "review-analyzer"
        sanitize_name("  SaaS (Pro)  ") -> "saas-pro"
    """
    result = re.sub(r"[^a-zA-Z0-9_-]", "-", name.strip().lower())
    result = re.sub(r"-+", "-", result)
    return result.strip("-")


# ---------------------------------------------------------------------------
# Context I/O
# ---------------------------------------------------------------------------

_YAML_SUFFIXES = (".yaml", ".yml")


def load_context_file(path: str | Path) -> dict[str, Any]:
    """Load a raw analysis context from a JSON or YAML file.

    The suffix decides the parser: ``.yaml`` / ``.yml`` go through
    ``yaml.safe_load``, anything else is read as JSON.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidContextError: If the file cannot be parsed or its top level
            is not a mapping.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidContextError(f"Cannot parse {file_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidContextError(
            f"{file_path} must contain a mapping at the top level, "
            f"got {type(data).__name__}"
        )
    return data


async def write_project(project: GeneratedProject, directory: str | Path) -> list[Path]:
    """Write every file of *project* under *directory*.

    Parent directories are created automatically and the writes run in a
    worker thread.  Files are written in assembly order.

    Returns:
        The written paths, in assembly order.

    Raises:
        ValueError: If a file path would escape *directory*.
    """
    root = Path(directory).resolve()

    def _write_all() -> list[Path]:
        written: list[Path] = []
        for relative, content in project.files.items():
            target = (root / relative).resolve()
            if not target.is_relative_to(root):
                raise ValueError(f"Refusing to write outside {root}: {relative}")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            written.append(target)
        return written

    return await asyncio.to_thread(_write_all)


def is_empty_dir(path: str | Path) -> bool:
    """Return ``True`` if *path* does not exist or is an empty directory."""
    dir_path = Path(path)
    if not dir_path.exists():
        return True
    return dir_path.is_dir() and not any(dir_path.iterdir())


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_size(num_bytes: int) -> str:
    """Format a byte count for the dry-run listing.

    Examples::

        format_size(512)  -> "512 B"
        format_size(2048) -> "2.0 KB"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    return f"{num_bytes / 1024:.1f} KB"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value, printed literally (markup is escaped).
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
