"""Login form discovery CLI command."""

import json
from pathlib import Path

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import app, configure_logging, console, fail


@app.command("discover")
def discover(
    url: str = typer.Argument(..., help="URL of the login page"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the form descriptor to this file"),
    referer: str = typer.Option("", "--referer", help="Referer header to send with submissions"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Describe the login form at URL as a reusable JSON form file."""
    cli = cli_module()

    try:
        config = cli.load_probe_config(verbose=verbose or None)
    except ValueError as exc:
        raise fail(str(exc)) from exc
    configure_logging(config.verbose)

    try:
        descriptor = cli.safe_async_run(
            cli.discover_login_form(url, config=config, referer=referer)
        )
    except cli.ProbeError as exc:
        raise fail(str(exc)) from exc

    if output is None:
        console.print_json(json.dumps(descriptor.to_dict()))
        return

    cli.save_form_descriptor(descriptor, output)
    console.print(f"[green]Form descriptor written to[/green] {escape(str(output))}")
