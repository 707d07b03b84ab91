"""Password generation CLI command."""

import typer

from .deps import cli_module
from .shared import app, console


@app.command("passwords")
def passwords(
    firstname: str = typer.Option("", "--firstname", help="First name to derive birth-year passwords from"),
    org: str = typer.Option("", "--org", help="Organisation name or URL to derive passwords from"),
    depth: int = typer.Option(0, "--depth", "-d", min=0, help="Transformation depth (0-3)"),
) -> None:
    """Print the generated password candidates, one per line."""
    cli = cli_module()

    options = cli.PasswordOptions(depth=depth, firstname=firstname, org_or_url=org)
    for password in cli.generate(options):
        console.print(password, markup=False, highlight=False)
