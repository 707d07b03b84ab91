"""Verbose request/response tracing.

Every helper takes an explicit ``enabled`` flag, normally
``ProbeConfig.verbose``, so tracing never depends on process-wide state.
"""

from typing import Any

import httpx
from rich.console import Console
from rich.rule import Rule

# Bodies shorter than this are dumped in full.
SMALL_BODY_LIMIT = 200

_console = Console(stderr=True)


def debug_print(enabled: bool, category: str, message: str, **data: Any) -> None:
    """Print debug information when tracing is enabled.

    Args:
        enabled: Whether tracing is on for the caller
        category: Debug category (request, response, redirect, form)
        message: Main message to display
        **data: Additional key-value pairs to display
    """
    if not enabled:
        return
    _console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            _console.print(f"  {key}:", style="dim")
            for sub_key, sub_value in value.items():
                _console.print(f"    {sub_key}: {sub_value}", style="dim", markup=False)
        elif isinstance(value, list):
            _console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim", markup=False)
        else:
            _console.print(f"  {key}: {value}", style="dim", markup=False)


def debug_request(enabled: bool, request: httpx.Request) -> None:
    """Dump an outgoing request: request line, headers and body."""
    if not enabled:
        return
    _console.print(Rule(style="dim"))
    body = request.content.decode("utf-8", errors="replace") if request.content else None
    debug_print(
        enabled,
        "request",
        f"{request.method} {request.url}",
        Headers=dict(request.headers),
        Body=body,
    )
    _console.print(Rule(style="dim"))


def debug_redirect(enabled: bool, response: httpx.Response, hop: int) -> None:
    """Log one followed redirect."""
    debug_print(
        enabled,
        "redirect",
        f"Redirecting to {response.headers.get('location', '')} ({hop})",
    )


def debug_response(enabled: bool, response: httpx.Response, body: bytes) -> None:
    """Log the final response status and, when short, its body."""
    if not enabled:
        return
    debug_print(enabled, "response", f"-> Response {response.status_code} {response.reason_phrase}")
    if len(body) < SMALL_BODY_LIMIT:
        _console.print(Rule("Response Body", style="dim"))
        _console.print(body.decode("utf-8", errors="replace"), markup=False)
        _console.print(Rule(style="dim"))
