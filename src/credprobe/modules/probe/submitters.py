"""Credential submitters: one authentication attempt per call."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Protocol
from urllib.parse import urlencode, urljoin

import httpx

from credprobe.utils.debug import debug_print, debug_redirect, debug_request, debug_response

from .errors import (
    ProbeSetupError,
    ProbeTransportError,
    ProtocolMismatchError,
    RedirectLimitError,
)
from .form import FORM_ENCODED, JSON_ENCODED, FormDescriptor
from .html import find_meta_content
from .models import ProbeConfig
from .signature import Signature

logger = logging.getLogger(__name__)

# httpcore trace events, suffixes shared by the http11 and http2 connections.
_REQUEST_WRITTEN = "send_request_body.complete"
_FIRST_RESPONSE_BYTE = "receive_response_headers.complete"


class CredentialSubmitter(Protocol):
    """Anything that can perform one authentication attempt."""

    @property
    def url(self) -> str: ...

    async def try_credentials(self, username: str, password: str) -> Signature: ...


def _client(config: ProbeConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(follow_redirects=True, max_redirects=config.max_redirects)


async def send_request(
    method: str,
    url: str,
    *,
    config: ProbeConfig,
    username: str = "",
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
    auth: httpx.Auth | None = None,
) -> tuple[Signature, httpx.Response]:
    """Send one request and fingerprint its response.

    Server processing time is measured between the request body being fully
    written and the response headers arriving, so connection and TLS setup
    are excluded. After redirects the timing belongs to the final hop.
    """
    timings: dict[str, float] = {}

    async def trace(event_name: str, info: dict[str, Any]) -> None:
        if event_name.endswith(_REQUEST_WRITTEN):
            timings["written"] = time.perf_counter()
        elif event_name.endswith(_FIRST_RESPONSE_BYTE):
            timings["first_byte"] = time.perf_counter()

    try:
        async with _client(config) as client:
            request = client.build_request(
                method,
                url,
                headers=headers,
                content=content,
                extensions={"trace": trace},
            )
            debug_request(config.verbose, request)
            response = await client.send(request, auth=auth)
            body = response.content
    except httpx.TooManyRedirects as exc:
        raise RedirectLimitError(
            f"{method} {url}: stopped after {config.max_redirects} redirects"
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProbeTransportError(f"{method} {url}: {exc}") from exc

    for hop, redirect in enumerate(response.history, start=1):
        debug_redirect(config.verbose, redirect, hop)
    debug_response(config.verbose, response, body)

    processing_time = 0.0
    if "written" in timings and "first_byte" in timings:
        processing_time = max(0.0, timings["first_byte"] - timings["written"])

    signature = Signature(
        redirect_count=len(response.history),
        status_code=response.status_code,
        response_size=len(body),
        server_processing_time=processing_time,
        username=username,
    )
    logger.info("%s", signature)
    return signature, response


class FormSubmitter:
    """Submit credentials through an HTML login form.

    The login page is fetched again before every attempt because CSRF tokens
    are usually single-use or short-lived.
    """

    def __init__(self, descriptor: FormDescriptor, config: ProbeConfig) -> None:
        descriptor.validate()
        self.descriptor = descriptor
        self.config = config

    @property
    def url(self) -> str:
        return self.descriptor.url

    @property
    def action_url(self) -> str:
        if not self.descriptor.action_path:
            return self.descriptor.url
        return urljoin(self.descriptor.url, self.descriptor.action_path)

    async def refresh_token_and_cookie(self) -> tuple[str, tuple[str, str] | None]:
        """Fetch the login page for a fresh CSRF token and session cookie.

        A non-200 page yields no token and no cookie; the attempt then goes
        out without them instead of aborting the run.
        """
        try:
            async with _client(self.config) as client:
                response = await client.get(
                    self.descriptor.url,
                    headers={"User-Agent": self.config.user_agent},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ProbeTransportError(f"grabbing cookie and token: {exc}") from exc

        if response.status_code != 200:
            logger.warning(
                "Login page %s answered %s; submitting without token and cookie",
                self.descriptor.url,
                response.status_code,
            )
            return "", None

        token = find_meta_content(response.text, "csrf-token")
        cookie = next(((c.name, c.value) for c in response.cookies.jar), None)
        return token, cookie

    def build_body(self, username: str, password: str) -> tuple[bytes, str]:
        """Encode the submission body and return it with its content type."""
        descriptor = self.descriptor
        if descriptor.is_json:
            data: dict[str, str] = {
                descriptor.username_field: username,
                descriptor.password_field: password,
            }
            for extra in descriptor.extra_inputs:
                data[extra.name] = extra.value
            return json.dumps(data).encode("utf-8"), JSON_ENCODED

        form: dict[str, str] = {}
        if descriptor.token_value and descriptor.token_name:
            debug_print(self.config.verbose, "form", f"Set authenticity token {descriptor.token_value}")
            form[descriptor.token_name] = descriptor.token_value
        form[descriptor.username_field] = username
        form[descriptor.password_field] = password
        for extra in descriptor.extra_inputs:
            form[extra.name] = extra.value
        return urlencode(form).encode("utf-8"), FORM_ENCODED

    async def try_credentials(self, username: str, password: str) -> Signature:
        token, cookie = await self.refresh_token_and_cookie()
        self.descriptor.token_value = token

        body, content_type = self.build_body(username, password)
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "*/*",
            "Content-Type": content_type,
            "Content-Length": str(len(body)),
        }
        if self.descriptor.referer:
            headers["Referer"] = self.descriptor.referer
        if cookie is not None:
            debug_print(self.config.verbose, "form", f"Set cookie {cookie[0]}={cookie[1]}")
            headers["Cookie"] = f"{cookie[0]}={cookie[1]}"

        debug_print(self.config.verbose, "form", f"Posting at {self.action_url}")
        signature, _ = await send_request(
            "POST",
            self.action_url,
            config=self.config,
            username=username,
            headers=headers,
            content=body,
        )
        return signature


class BasicAuthSubmitter:
    """Submit credentials with HTTP Basic authentication."""

    def __init__(self, url: str, config: ProbeConfig) -> None:
        if not url:
            raise ProbeSetupError("Basic authentication requires a URL")
        self._url = url
        self.config = config

    @property
    def url(self) -> str:
        return self._url

    async def try_credentials(self, username: str, password: str) -> Signature:
        signature, response = await send_request(
            "GET",
            self._url,
            config=self.config,
            username=username,
            headers={"User-Agent": self.config.user_agent},
            auth=httpx.BasicAuth(username, password),
        )
        challenge = response.headers.get("WWW-Authenticate", "")
        if response.status_code != 200 and not challenge.startswith("Basic"):
            raise ProtocolMismatchError(self._url, challenge)
        return signature


def create_submitter(
    config: ProbeConfig,
    *,
    url: str | None = None,
    descriptor: FormDescriptor | None = None,
    basic: bool = False,
) -> CredentialSubmitter:
    """Select the submitter variant for a run."""
    if basic:
        return BasicAuthSubmitter(url or "", config)
    if descriptor is None:
        raise ProbeSetupError("Form mode requires a form descriptor")
    return FormSubmitter(descriptor, config)
