"""Shared CLI app objects and helpers."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

app = typer.Typer(
    name="credprobe",
    help="Differential-response credential prober for authorized assessments",
    no_args_is_help=True,
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route credprobe loggers through rich; DEBUG when verbose."""
    logger = logging.getLogger("credprobe")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def fail(message: str, hint: str | None = None) -> typer.Exit:
    """Print an error (and optional hint) and return the exit to raise."""
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)
    if hint:
        console.print(f"[dim]{escape(hint)}[/dim]")
    return typer.Exit(1)
