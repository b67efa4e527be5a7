"""Typer-based CLI for obslint."""

import json
import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import LintConfig
from .errors import ObslintError
from .lint import lint_vault
from .models import LintResult

app = typer.Typer(
    name="obslint",
    help="Find plain-text mentions of wikilink targets that are not linked",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_reports(result: LintResult) -> None:
    for report in result.reports:
        terms = escape(", ".join(report.unlinked))
        console.print(f"[blue]{escape(report.rel_path)}[/blue]: {terms}", highlight=False, soft_wrap=True)


def _print_summary(result: LintResult, out: Console) -> None:
    table = Table(title="obslint summary")
    table.add_column("Documents scanned", style="cyan", justify="right")
    table.add_column("Link targets", style="magenta", justify="right")
    table.add_column("Documents with findings", style="yellow", justify="right")
    table.add_column("Unlinked mentions", style="red", justify="right")
    table.add_row(
        str(result.scanned),
        str(result.vocabulary_size),
        str(len(result.reports)),
        str(result.findings),
    )
    out.print(table)


@app.command()
def check(
    vault_dir: str = typer.Argument(..., help="Root directory of the vault to scan"),
    ext: Optional[list[str]] = typer.Option(
        None,
        "--ext",
        "-e",
        help="File extension to scan (repeatable, default: .md)",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob of vault-relative paths to skip (repeatable)",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Worker threads for loading and detection (1 = serial)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print findings as a JSON array instead of text lines",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Print a summary table after the findings",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with code 1 when any unlinked mention is found",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
):
    """Report unlinked mentions of existing link targets, one line per document.

    Each line reads 'relative/path.md: Term A, Term B'. Documents without
    findings print nothing.
    """
    _configure_logging(debug)

    try:
        cfg = LintConfig.from_env(
            vault_dir,
            cli_extensions=ext or None,
            cli_exclude=exclude or None,
            cli_workers=workers,
        )
        result = lint_vault(cfg)
    except (FileNotFoundError, ValueError, ValidationError, ObslintError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        payload = [{"path": r.rel_path, "unlinked": list(r.unlinked)} for r in result.reports]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_reports(result)

    if summary:
        # Keep stdout valid JSON
        _print_summary(result, err_console if as_json else console)

    if strict and result.reports:
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show obslint version."""
    from . import __version__
    console.print(f"obslint v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
