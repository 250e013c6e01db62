"""Command-line entry point for ``mvp-scaffold`` / ``python -m mvp_scaffold.cli``.

Sub-commands::

    mvp-scaffold archetypes
    mvp-scaffold recommend context.json
    mvp-scaffold generate context.yaml -o ./output --archetype calculator
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.table import Table

from .config import Settings
from .models import InvalidContextError, load_context
from .planner import ARCHETYPES, UnknownArchetypeError, archetype_ids
from .scaffolder import MVPGenerator, package_slug
from .utils import (
    console,
    format_size,
    is_empty_dir,
    load_context_file,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_project,
)


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------


def cmd_archetypes(args: argparse.Namespace) -> None:
    table = Table(title="MVP archetypes", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Complexity")
    table.add_column("Time")
    table.add_column("Tech stack")

    for definition in ARCHETYPES:
        table.add_row(
            f"{definition.icon} {definition.id.value}",
            definition.name_ru,
            definition.complexity.value,
            definition.generation_time,
            ", ".join(definition.tech_stack),
        )
    console.print(table)


def cmd_recommend(args: argparse.Namespace) -> None:
    context = load_context(load_context_file(args.context))
    result = MVPGenerator(Settings.from_env()).recommend(context)

    print_summary_table(
        {
            "Archetype": result.archetype.value,
            "Confidence": f"{result.confidence}%",
            "Reason": result.reason,
            "Alternatives": ", ".join(a.value for a in result.alternatives),
        },
        title=f"Recommendation for {escape(context.trend.title)}",
    )
    print_summary_table(
        {archetype.value: str(score) for archetype, score in result.scores.items()},
        title="Keyword scores",
    )
    if result.confidence == 0:
        print_warning("No archetype keywords matched; falling back to the landing page.")


def cmd_generate(args: argparse.Namespace) -> None:
    settings = Settings.from_env()
    if args.output:
        settings.output_dir = Path(args.output)
    if args.force:
        settings.overwrite = True

    context = load_context(load_context_file(args.context))
    project = MVPGenerator(settings).generate(context, args.archetype)
    target = settings.output_dir / package_slug(project.project_name)

    confidence = "override" if project.confidence is None else f"{project.confidence}%"
    print_summary_table(
        {
            "Project": project.project_name,
            "Archetype": project.archetype.value,
            "Confidence": confidence,
            "Files": str(len(project.files)),
            "Directory": str(target),
        },
        title="MVP generation",
    )

    if args.dry_run:
        for path, content in project.files.items():
            console.print(f"  {path} [dim]({format_size(len(content.encode('utf-8')))})[/dim]")
        print_warning("Dry run: nothing was written.")
        return

    if not settings.overwrite and not is_empty_dir(target):
        print_error(f"Error: {escape(str(target))} is not empty (use --force to overwrite)")
        sys.exit(1)

    written = asyncio.run(write_project(project, target))
    print_success(f"Wrote {len(written)} files to {escape(str(target))}")
    console.print("\nNext steps:")
    for step in project.setup_instructions[1:]:
        console.print(f"  [cyan]{step}[/cyan]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mvp-scaffold",
        description="Generate a deployable Next.js MVP from a market-analysis context",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mvp-scaffold archetypes\n"
            "  mvp-scaffold recommend context.json\n"
            "  mvp-scaffold generate context.yaml -o ./output\n"
            "  mvp-scaffold generate context.json --archetype dashboard --dry-run\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    archetypes = subparsers.add_parser("archetypes", help="List the available archetypes")
    archetypes.set_defaults(func=cmd_archetypes)

    recommend = subparsers.add_parser("recommend", help="Recommend an archetype for a context")
    recommend.add_argument("context", help="Path to the analysis context (.json, .yaml, .yml)")
    recommend.set_defaults(func=cmd_recommend)

    generate = subparsers.add_parser("generate", help="Generate the MVP project")
    generate.add_argument("context", help="Path to the analysis context (.json, .yaml, .yml)")
    generate.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./output or $MVP_OUTPUT_DIR)",
    )
    generate.add_argument(
        "--archetype",
        choices=[a.value for a in archetype_ids()],
        default=None,
        help="Skip classification and use this archetype",
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="List the files that would be written",
    )
    generate.add_argument(
        "--force",
        action="store_true",
        help="Write into a non-empty project directory",
    )
    generate.set_defaults(func=cmd_generate)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        args.func(args)
    except FileNotFoundError as exc:
        print_error(f"Error: file not found: {escape(str(exc.filename))}")
        sys.exit(1)
    except (InvalidContextError, UnknownArchetypeError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
