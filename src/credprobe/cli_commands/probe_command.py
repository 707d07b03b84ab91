"""Credential probe CLI command."""

from pathlib import Path

import typer
from rich.markup import escape

from .deps import cli_module
from .shared import app, configure_logging, console, fail


def _resolve_passwords(cli, passwords: str, firstname: str, org: str, url: str, depth: int) -> list[str]:
    """Use the explicit password list when given, otherwise generate one."""
    if passwords:
        return cli.load_wordlist(passwords)
    options = cli.PasswordOptions(depth=depth, firstname=firstname, org_or_url=org or url)
    return cli.generate(options)


def _build_submitter(cli, config, url: str, form_file: Path | None, basic: bool):
    """Select and construct the submitter for this run."""
    if basic:
        return cli.create_submitter(config, url=url, basic=True)

    if form_file is not None:
        descriptor = cli.load_form_descriptor(form_file)
    elif url:
        console.print(f"[blue]Discovering login form at {escape(url)}...[/blue]")
        descriptor = cli.safe_async_run(cli.discover_login_form(url, config=config))
    else:
        raise cli.ProbeSetupError("Either --url or --form-file is required")
    return cli.create_submitter(config, descriptor=descriptor)


@app.command("probe")
def probe(
    url: str = typer.Option("", "--url", "-u", help="Login page (form mode) or protected resource (--basic)"),
    form_file: Path | None = typer.Option(None, "--form-file", "-f", help="Form descriptor JSON file"),
    basic: bool = typer.Option(False, "--basic", help="Use HTTP Basic authentication"),
    usernames: str = typer.Option(
        "", "--usernames", help="Comma-separated usernames or path to a username file"
    ),
    passwords: str = typer.Option(
        "", "--passwords", help="Comma-separated passwords or path to a file (skips generation)"
    ),
    firstname: str = typer.Option("", "--firstname", help="First name seed for password generation"),
    org: str = typer.Option("", "--org", help="Organisation name or URL seed (defaults to --url)"),
    depth: int = typer.Option(0, "--depth", "-d", min=0, help="Password transformation depth (0-3)"),
    wait: float | None = typer.Option(None, "--wait", min=0, help="Seconds to wait after every attempt"),
    jitter: float | None = typer.Option(None, "--jitter", min=0, help="Maximum random seconds added to the wait"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Dump requests and responses"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Probe a login endpoint for credentials that answer unlike a wrong one."""
    cli = cli_module()

    try:
        config = cli.load_probe_config(wait=wait, jitter=jitter, verbose=verbose or None)
    except ValueError as exc:
        raise fail(str(exc)) from exc
    configure_logging(config.verbose)

    try:
        if basic and not url:
            raise cli.ProbeSetupError("--basic requires --url")
        username_list = cli.load_wordlist(usernames)
        if not username_list:
            raise cli.ProbeSetupError("No usernames given; use --usernames with a list or a file")
        password_list = _resolve_passwords(cli, passwords, firstname, org, url, depth)
        submitter = _build_submitter(cli, config, url, form_file, basic)
    except cli.ProbeError as exc:
        raise fail(str(exc)) from exc

    prober = cli.Prober(submitter, username_list, password_list, config)
    console.print(
        f"Target: [cyan]{escape(submitter.url)}[/cyan] "
        f"({'basic auth' if basic else 'form'}, "
        f"{len(username_list)} usernames x {len(password_list)} passwords)"
    )
    console.print(f"Estimated max time {prober.estimated_duration():.1f} mins")

    if not yes and not typer.confirm("Start probing?", default=False):
        console.print("[yellow]Aborted.[/yellow]")
        raise typer.Exit(1)

    try:
        candidates = cli.safe_async_run(prober.run())
    except cli.ProbeError as exc:
        hint = None
        if isinstance(exc, cli.ProtocolMismatchError) or isinstance(
            exc.__cause__, cli.ProtocolMismatchError
        ):
            hint = "The endpoint does not use Basic authentication; retry without --basic."
        raise fail(str(exc), hint) from exc

    if not candidates:
        console.print("[yellow]No candidates found.[/yellow]")
        return

    console.print(f"[green]Candidates ({len(candidates)}):[/green]")
    for candidate in candidates:
        console.print(f"  {candidate}", markup=False, highlight=False)
