"""Login form discovery: build a FormDescriptor from a live login page."""

from __future__ import annotations

import logging

import httpx

from .errors import LoginFormNotFoundError, ProbeSetupError, ProbeTransportError
from .form import FormDescriptor
from .html import (
    NON_VALUE_INPUT_TYPES,
    extract_inputs,
    find_meta_content,
    form_action,
    select_login_form,
)
from .models import ProbeConfig

logger = logging.getLogger(__name__)

USERNAME_HINTS = ("log", "name", "mail")
PASSWORD_HINTS = ("pass",)
# Rails default, skipped even when the page advertises no csrf-param.
DEFAULT_TOKEN_NAME = "authenticity_token"


def describe_form(url: str, html: str, referer: str = "") -> FormDescriptor:
    """Build a descriptor from the HTML of a login page."""
    token_name = find_meta_content(html, "csrf-param")
    token_value = find_meta_content(html, "csrf-token")

    form_html = select_login_form(html)
    if form_html is None:
        raise LoginFormNotFoundError(f"no form found at {url}")

    descriptor = FormDescriptor(
        url=url,
        referer=referer,
        action_path=form_action(form_html),
        token_name=token_name,
        token_value=token_value,
    )

    skipped = {token_name, DEFAULT_TOKEN_NAME} - {""}
    for field, field_type in extract_inputs(form_html):
        if field.name in skipped or field_type in NON_VALUE_INPUT_TYPES:
            continue
        name = field.name.lower()
        if not descriptor.password_field and any(h in name for h in PASSWORD_HINTS):
            descriptor.password_field = field.name
            continue
        if not descriptor.username_field and any(h in name for h in USERNAME_HINTS):
            descriptor.username_field = field.name
            continue
        if field.value:
            descriptor.extra_inputs.append(field)

    if not descriptor.password_field:
        raise LoginFormNotFoundError(f"no password field found in the login form at {url}")
    if not descriptor.username_field:
        raise LoginFormNotFoundError(f"no username field found in the login form at {url}")

    logger.debug(
        "Discovered form at %s: action=%r user=%r pass=%r extras=%d",
        url,
        descriptor.action_path,
        descriptor.username_field,
        descriptor.password_field,
        len(descriptor.extra_inputs),
    )
    return descriptor


async def discover_login_form(
    url: str,
    *,
    config: ProbeConfig,
    referer: str = "",
) -> FormDescriptor:
    """Fetch a login page and describe its login form."""
    if not url:
        raise ProbeSetupError("A URL is required to discover a login form")

    try:
        async with httpx.AsyncClient(
            follow_redirects=True, max_redirects=config.max_redirects
        ) as client:
            response = await client.get(url, headers={"User-Agent": config.user_agent})
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ProbeTransportError(f"GET {url}: {exc}") from exc

    if response.status_code != 200:
        raise ProbeSetupError(f"status code error: {response.status_code} {response.reason_phrase}")

    return describe_form(url, response.text, referer=referer)
