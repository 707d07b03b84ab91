"""Small regex helpers for reading login pages."""

from __future__ import annotations

import re

from .form import FormInput

NON_VALUE_INPUT_TYPES = {"submit", "button", "reset", "file", "image"}


def extract_attr(tag_html: str, attr_name: str) -> str | None:
    """Extract one HTML attribute value from a tag."""
    match = re.search(
        rf'(?<![\w-]){re.escape(attr_name)}\s*=\s*["\']([^"\']*)["\']',
        tag_html,
        re.IGNORECASE,
    )
    if match:
        return match.group(1).strip()
    return None


def head_section(html: str) -> str:
    """Return the <head> element.

    Pages that omit the <head> tag get an implied head: everything before
    <body>, or the whole document when there is no <body> tag either.
    """
    match = re.search(r"<head\b.*?</head>", html, re.DOTALL | re.IGNORECASE)
    if match:
        return match.group(0)
    body = re.search(r"<body\b", html, re.IGNORECASE)
    return html[: body.start()] if body else html


def find_meta_content(html: str, name: str) -> str:
    """Return the content of the first ``<head>`` meta tag with the given name."""
    for tag in re.findall(r"<meta\b[^>]*>", head_section(html), re.IGNORECASE):
        if (extract_attr(tag, "name") or "").lower() == name.lower():
            return extract_attr(tag, "content") or ""
    return ""


def find_forms(html: str) -> list[str]:
    return re.findall(r"<form\b[^>]*>.*?</form>", html, re.DOTALL | re.IGNORECASE)


def form_action(form_html: str) -> str:
    """Return the raw action attribute of a form's opening tag."""
    opening = re.match(r"<form\b[^>]*>", form_html, re.IGNORECASE)
    if not opening:
        return ""
    return extract_attr(opening.group(0), "action") or ""


def has_password_input(form_html: str) -> bool:
    return bool(re.search(r'type\s*=\s*["\']password["\']', form_html, re.IGNORECASE))


def select_login_form(html: str) -> str | None:
    """Return the most likely login form.

    Prefers a form with a password field, then one whose action mentions
    signing or logging in, then the first form on the page.
    """
    forms = find_forms(html)
    for candidate in forms:
        if has_password_input(candidate):
            return candidate
    for candidate in forms:
        action = form_action(candidate).lower()
        if "sign" in action or "login" in action:
            return candidate
    return forms[0] if forms else None


def extract_inputs(form_html: str) -> list[tuple[FormInput, str]]:
    """Return every named input of a form with its lowercased type."""
    inputs: list[tuple[FormInput, str]] = []
    for tag in re.findall(r"<input\b[^>]*>", form_html, re.IGNORECASE):
        name = extract_attr(tag, "name")
        if not name:
            continue
        field_type = (extract_attr(tag, "type") or "text").lower()
        inputs.append((FormInput(name=name, value=extract_attr(tag, "value") or ""), field_type))
    return inputs
