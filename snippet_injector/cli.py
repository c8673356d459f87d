"""
snippet_injector CLI

Command-line interface for injecting and verifying codesnippets.

Usage:
    # Inject codesnippets using a YAML config
    python -m snippet_injector inject --config codesnippets.yaml

    # Check that injected codesnippets are current (CI)
    python -m snippet_injector verify --sources-root src/main/java --no-readme

    # List every codesnippet definition
    python -m snippet_injector list --codesnippet-root src/samples/java
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

import config as settings
from utils.exceptions import SnippetInjectorError
from utils.logging_config import setup_logging

from .config import InjectionConfig
from .models import RunReport

console = Console()


def _load_config(args: argparse.Namespace) -> InjectionConfig:
    """Build the run configuration from --config plus flag overrides."""
    base = InjectionConfig.from_yaml(Path(args.config)) if args.config else InjectionConfig()
    return base.with_overrides(
        codesnippet_root=args.codesnippet_root,
        codesnippet_glob=args.codesnippet_glob,
        sources_root=getattr(args, "sources_root", None),
        sources_glob=getattr(args, "sources_glob", None),
        readme_path=getattr(args, "readme", None),
        include_sources=False if getattr(args, "no_sources", False) else None,
        include_readme=False if getattr(args, "no_readme", False) else None,
        max_line_length=getattr(args, "max_line_length", None),
        enforce_max_line_length=True if getattr(args, "enforce_line_length", False) else None,
    )


def _print_report(report: RunReport, verb: str) -> None:
    if report.skipped:
        console.print("[yellow]Neither sources nor README included; nothing to do.[/yellow]")
        return

    table = Table(title="Codesnippets")
    table.add_column("File", style="cyan")
    table.add_column("Status", style="green")
    changed = set(report.files_updated) | set(report.files_out_of_date)
    for path in report.files_processed:
        table.add_row(str(path), verb if path in changed else "up to date")
    console.print(table)
    console.print(
        f"[green]{report.definitions} definition(s), "
        f"{len(report.files_processed)} file(s) processed[/green]"
    )


def cmd_inject(args: argparse.Namespace) -> int:
    """Inject codesnippets into sources and README."""
    from .runner import inject_codesnippets

    report = inject_codesnippets(_load_config(args))
    _print_report(report, "updated")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify injected codesnippets without writing."""
    from .runner import verify_codesnippets

    report = verify_codesnippets(_load_config(args))
    _print_report(report, "out of date")
    console.print("[green]All codesnippets are up to date.[/green]")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List codesnippet definitions."""
    from .definitions import scan_definitions
    from .discovery import glob_files

    config = _load_config(args)
    files = glob_files(config.codesnippet_root, config.codesnippet_glob)
    result = scan_definitions(files)

    if not result.definitions and not result.duplicates:
        console.print("[yellow]No codesnippet definitions found.[/yellow]")
        return 0

    table = Table(title="Codesnippet Definitions")
    table.add_column("Alias", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Lines", style="yellow")
    table.add_column("Status", style="blue")

    rows = [(d, "ok") for d in result.definitions.values()]
    rows += [(d, "duplicate") for d in result.duplicates]
    for definition, status in sorted(rows, key=lambda r: (r[0].alias, str(r[0].definition_file))):
        table.add_row(
            definition.alias,
            str(definition.definition_file),
            f"{definition.begin_line}-{definition.end_line}",
            status,
        )
    console.print(table)

    return 1 if result.duplicates else 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", "-c", help="Path to config YAML")
    parser.add_argument("--codesnippet-root", help="Directory containing codesnippet definitions")
    parser.add_argument("--codesnippet-glob", help="Glob for definition files (default **/*.java)")


def _add_injection_arguments(parser: argparse.ArgumentParser) -> None:
    _add_common_arguments(parser)
    parser.add_argument("--sources-root", help="Directory containing sources with Javadoc sites")
    parser.add_argument("--sources-glob", help="Glob for source files (default **/*.java)")
    parser.add_argument("--readme", help="README file with ```java <alias> sites")
    parser.add_argument("--no-sources", action="store_true", help="Skip source files")
    parser.add_argument("--no-readme", action="store_true", help="Skip README")
    parser.add_argument("--max-line-length", type=int, help="Max injected line length")
    parser.add_argument(
        "--enforce-line-length",
        action="store_true",
        help="Report injected codesnippets longer than --max-line-length",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="snippet-injector",
        description="Inject and verify codesnippets in Javadocs and READMEs",
    )
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    inject_parser = subparsers.add_parser("inject", help="Inject codesnippets")
    _add_injection_arguments(inject_parser)

    verify_parser = subparsers.add_parser("verify", help="Verify codesnippets are up to date")
    _add_injection_arguments(verify_parser)

    list_parser = subparsers.add_parser("list", help="List codesnippet definitions")
    _add_common_arguments(list_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings.validate_config()
    setup_logging(
        level=args.log_level or settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        file_logs=settings.FILE_LOGS,
    )

    commands = {
        "inject": cmd_inject,
        "verify": cmd_verify,
        "list": cmd_list,
    }
    try:
        return commands[args.command](args)
    except SnippetInjectorError as e:
        # Messages contain file paths and brackets, so no rich markup
        console.print(str(e), style="red", markup=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
