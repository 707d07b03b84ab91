"""credprobe CLI - differential-response credential prober."""

from credprobe.cli_commands.shared import app, console
from credprobe.config import (
    get_env_file_path,
    get_global_config_path,
    load_probe_config,
)
from credprobe.modules.passwords import PasswordOptions, generate
from credprobe.modules.probe import (
    Prober,
    ProbeError,
    ProbeSetupError,
    ProtocolMismatchError,
    create_submitter,
    discover_login_form,
    load_form_descriptor,
    load_wordlist,
    save_form_descriptor,
)
from credprobe.utils.async_utils import safe_async_run

# Register commands on the shared app.
from credprobe.cli_commands import (  # noqa: E402,F401
    config_command,
    discover_command,
    passwords_command,
    probe_command,
    version_command,
)

__all__ = [
    "PasswordOptions",
    "ProbeError",
    "ProbeSetupError",
    "Prober",
    "ProtocolMismatchError",
    "app",
    "console",
    "create_submitter",
    "discover_login_form",
    "generate",
    "get_env_file_path",
    "get_global_config_path",
    "load_form_descriptor",
    "load_probe_config",
    "load_wordlist",
    "main",
    "safe_async_run",
    "save_form_descriptor",
]


def main():
    """Entry point for the CLI."""
    app()
