"""Test configuration and fixtures for credprobe."""

import tempfile
import threading
import time
from collections.abc import Callable, Generator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

from credprobe.modules.probe import ProbeConfig, Signature


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
    """Keep real env vars, ~/.credprobe and ./.credprobe.env out of tests."""
    for key in (
        "CREDPROBE_WAIT",
        "CREDPROBE_JITTER",
        "CREDPROBE_VERBOSE",
        "CREDPROBE_MAX_REDIRECTS",
        "CREDPROBE_USER_AGENT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CREDPROBE_ENV_FILE", str(temp_dir / "missing.env"))
    monkeypatch.setattr(Path, "home", lambda: temp_dir)


@pytest.fixture
def probe_config() -> ProbeConfig:
    """A config that never waits between attempts."""
    return ProbeConfig(wait=0.0, jitter=0.0)


class _FakeSubmitter:
    """Submitter double that records calls and answers from a callback."""

    url = "https://example.com/login"

    def __init__(self, respond: Callable[[str, str], Signature]) -> None:
        self.respond = respond
        self.calls: list[tuple[str, str]] = []

    async def try_credentials(self, username: str, password: str) -> Signature:
        self.calls.append((username, password))
        return self.respond(username, password)


def _make_signature(
    redirects: int = 0,
    status: int = 200,
    size: int = 1000,
    username: str = "",
) -> Signature:
    return Signature(
        redirect_count=redirects,
        status_code=status,
        response_size=size,
        server_processing_time=0.01,
        username=username,
    )


@pytest.fixture
def make_signature() -> Callable[..., Signature]:
    """Factory for signatures; defaults describe a 1000-byte 200 response."""
    return _make_signature


@pytest.fixture
def fake_submitter() -> Callable[[Callable[[str, str], Signature]], _FakeSubmitter]:
    """Factory for recording submitter doubles."""
    return _FakeSubmitter


@pytest.fixture
def rails_login_page() -> str:
    """A Rails-style login page with CSRF meta tags and a decoy form."""
    return """<!DOCTYPE html>
<html>
<head>
  <title>Sign in</title>
  <meta name="csrf-param" content="authenticity_token" />
  <meta name="csrf-token" content="tok123" />
</head>
<body>
  <form action="/search" method="get">
    <input type="text" name="q" />
  </form>
  <form action="/users/sign_in" method="post">
    <input type="hidden" name="authenticity_token" value="tok123" />
    <input type="hidden" name="utf8" value="yes" />
    <input type="email" name="user[email]" />
    <input type="password" name="user[password]" />
    <input type="checkbox" name="user[remember_me]" value="1" />
    <input type="submit" name="commit" value="Log in" />
  </form>
</body>
</html>
"""


SLOW_RESPONSE_DELAY = 0.3

LOCAL_LOGIN_PAGE = b"""<html><head>
<meta name="csrf-param" content="authenticity_token">
<meta name="csrf-token" content="local-token">
</head><body><form action="/session"></form></body></html>"""


class _LoginSiteHandler(BaseHTTPRequestHandler):
    """Tiny login site.

    GET /login serves a token page with a session cookie, GET /slow and
    POST /session answer after SLOW_RESPONSE_DELAY, and GET /r/<n> redirects
    n times before answering 200.
    """

    def log_message(self, format, *args):
        pass

    def _reply(self, status: int, body: bytes = b"", headers: dict[str, str] | None = None) -> None:
        self.send_response(status)
        for name, value in (headers or {}).items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path == "/login":
            self._reply(200, LOCAL_LOGIN_PAGE, {"Set-Cookie": "_session=local; Path=/"})
        elif self.path == "/slow":
            time.sleep(SLOW_RESPONSE_DELAY)
            self._reply(200, b"slow")
        elif self.path.startswith("/r/"):
            remaining = int(self.path.rsplit("/", 1)[1])
            if remaining > 0:
                self._reply(302, headers={"Location": f"/r/{remaining - 1}"})
            else:
                self._reply(200, b"done")
        else:
            self._reply(404)

    def do_POST(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        if self.path == "/session":
            time.sleep(SLOW_RESPONSE_DELAY)
            self._reply(200, b"Invalid login")
        else:
            self._reply(404)


@pytest.fixture
def local_site(monkeypatch: pytest.MonkeyPatch) -> Generator[str, None, None]:
    """Serve the login site on a free localhost port and yield its base URL."""
    for key in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(key, raising=False)
    server = ThreadingHTTPServer(("127.0.0.1", 0), _LoginSiteHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()
