"""Root CLI application: render, check, preview and serve."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from faqrender.content.processor import check_sanitization, process_content, render_items
from faqrender.core.config import load_config
from faqrender.core.models import FAQItem
from faqrender.utils.log import configure_logging
from faqrender.validation.warnings import get_content_warnings

console = Console()
app = typer.Typer(
    name="faqrender",
    help="Render and check FAQ answers written in HTML, Markdown or plain text.",
    no_args_is_help=True,
)

FORMAT_HELP = "Content format: html, markdown or text (defaults to the configured format)"


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    source = Path(path)
    if not source.is_file():
        console.print(f"[red]File not found:[/red] {escape(path)}")
        raise typer.Exit(1)
    return source.read_text(encoding="utf-8")


def _resolve_format(fmt: Optional[str]) -> str:
    cfg = load_config()
    configure_logging(cfg.debug)
    return fmt or cfg.default_format.value


@app.command()
def render(
    path: str = typer.Argument(..., help="File to render, or - for stdin"),
    fmt: Optional[str] = typer.Option(None, "-f", "--format", help=FORMAT_HELP),
) -> None:
    """Print the sanitized HTML for a file."""
    content_format = _resolve_format(fmt)
    content = _read_source(path)
    typer.echo(process_content(content, content_format))


@app.command()
def check(
    path: str = typer.Argument(..., help="File to check, or - for stdin"),
    fmt: Optional[str] = typer.Option(None, "-f", "--format", help=FORMAT_HELP),
    strict: bool = typer.Option(False, help="Exit with status 1 when any warning is found"),
) -> None:
    """List content warnings for a file."""
    content_format = _resolve_format(fmt)
    content = _read_source(path)
    warnings = get_content_warnings(content, content_format)

    if not warnings:
        console.print("[green]No issues found.[/green]")
    else:
        table = Table(title=f"Content Warnings ({content_format})")
        table.add_column("#", style="dim", width=3)
        table.add_column("Warning", style="yellow")
        for i, warning in enumerate(warnings, start=1):
            table.add_row(str(i), escape(warning))
        console.print(table)

    if check_sanitization(content, content_format).modified:
        console.print("[dim]Sanitization changes this content before display.[/dim]")

    if warnings and strict:
        raise typer.Exit(1)


def _load_items(path: str) -> list[FAQItem]:
    try:
        data = yaml.safe_load(_read_source(path)) or []
    except yaml.YAMLError as exc:
        console.print(f"[red]Invalid YAML:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    if isinstance(data, dict):
        data = data.get("items", [])
    if not isinstance(data, list):
        console.print("[red]Expected a list of FAQ items.[/red]")
        raise typer.Exit(1)

    try:
        return [FAQItem(**entry) for entry in data]
    except (TypeError, ValidationError) as exc:
        console.print(f"[red]Invalid FAQ item:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


@app.command()
def preview(
    path: str = typer.Argument(..., help="YAML file with a list of FAQ items"),
) -> None:
    """Show every FAQ item with its format, warnings and sanitization status."""
    configure_logging(load_config().debug)
    rendered = render_items(_load_items(path))

    if not rendered:
        console.print("[dim]No FAQ items.[/dim]")
        return

    table = Table(title="FAQ Items")
    table.add_column("#", style="dim", width=3)
    table.add_column("Summary", style="cyan")
    table.add_column("Format", justify="center")
    table.add_column("Warnings", justify="right")
    table.add_column("Modified", justify="center")

    for i, item in enumerate(rendered, start=1):
        warn_style = "yellow" if item.warnings else "green"
        table.add_row(
            str(i),
            escape(item.summary) or "[dim](no summary)[/dim]",
            item.label,
            f"[{warn_style}]{len(item.warnings)}[/{warn_style}]",
            "[yellow]yes[/yellow]" if item.modified else "no",
        )
    console.print(table)

    for i, item in enumerate(rendered, start=1):
        for warning in item.warnings:
            console.print(f"  [dim]#{i}[/dim] [yellow]{escape(warning)}[/yellow]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind to"),
    port: Optional[int] = typer.Option(None, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the preview web service."""
    import uvicorn

    cfg = load_config()
    host = host or cfg.server.host
    port = port or cfg.server.port

    console.print("\n[bold]FAQ Render Preview Service[/bold]")
    console.print(f"Starting at [cyan]http://{host}:{port}[/cyan]\n")
    uvicorn.run(
        "faqrender.web.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level="debug" if cfg.debug else "info",
    )
