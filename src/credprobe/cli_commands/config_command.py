"""Configuration CLI command."""

import yaml

from .deps import cli_module
from .shared import app, console, fail


@app.command("config")
def config() -> None:
    """Show the effective probe settings and where they are read from."""
    cli = cli_module()

    try:
        settings = cli.load_probe_config()
    except ValueError as exc:
        raise fail(f"Invalid configuration: {exc}") from exc

    console.print("[bold]Effective settings:[/bold]")
    console.print(
        yaml.safe_dump(
            {
                "wait": settings.wait,
                "jitter": settings.jitter,
                "verbose": settings.verbose,
                "max_redirects": settings.max_redirects,
                "user_agent": settings.user_agent,
            },
            default_flow_style=False,
            sort_keys=False,
        ),
        markup=False,
        highlight=False,
    )
    console.print(f"[dim]Local env file: {cli.get_env_file_path()}[/dim]")
    console.print(f"[dim]Global config: {cli.get_global_config_path()}[/dim]")
