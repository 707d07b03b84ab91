"""Contextual password candidate generation."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from datetime import date
from urllib.parse import urlparse

from .transforms import pipeline_for_depth
from .wordlists import COMMON_PASSWORDS, KEYBOARD_WALKS

MIN_AGE = 30
MAX_AGE = 50
RECENT_YEARS = 5


@dataclass(frozen=True, slots=True)
class PasswordOptions:
    """Seeds and depth for password generation."""

    depth: int = 0
    firstname: str = ""
    org_or_url: str = ""


def common_passwords() -> list[str]:
    return list(COMMON_PASSWORDS)


def keyboard_walks() -> list[str]:
    return list(KEYBOARD_WALKS)


def from_firstname(firstname: str, current_year: int) -> list[str]:
    """Append every birth year of someone aged 30 to 50 to the first name."""
    if not firstname:
        return []
    return [
        f"{firstname}{year}"
        for year in range(current_year - MAX_AGE, current_year - MIN_AGE + 1)
    ]


def _is_ip_literal(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def org_word(seed: str) -> str | None:
    """Derive the organisation word from a name or URL.

    IP literals yield None. For URLs the lowercased hostname loses its
    top-level label, then one more label when more than one remains, and the
    leftmost remaining label is kept: ``https://Example.ACME.com`` gives
    ``example`` and ``https://acme.com`` gives ``acme``. Anything else is used
    as is, including seeds that do not parse as URLs.
    """
    if not seed or _is_ip_literal(seed):
        return None

    try:
        hostname = urlparse(seed).hostname
    except ValueError:
        return seed
    if not hostname:
        return seed
    if _is_ip_literal(hostname):
        return None

    labels = hostname.lower().split(".")
    if len(labels) > 1:
        labels = labels[:-1]
    if len(labels) > 1:
        labels = labels[:-1]
    return labels[0]


def from_org_or_url(seed: str, current_year: int) -> list[str]:
    """Combine the organisation word with each of the last five years."""
    word = org_word(seed)
    if not word:
        return []

    passwords: list[str] = []
    for year in range(current_year - RECENT_YEARS + 1, current_year + 1):
        short_year = str(year)[2:]
        passwords.extend(
            [
                f"{word}{year}",
                f"{word}{short_year}",
                f"{word}@{year}",
                f"{word}@{short_year}",
            ]
        )
    return passwords


def base_passwords(options: PasswordOptions, current_year: int) -> list[str]:
    return [
        *common_passwords(),
        *keyboard_walks(),
        *from_firstname(options.firstname, current_year),
        *from_org_or_url(options.org_or_url, current_year),
    ]


def generate(options: PasswordOptions, today: date | None = None) -> list[str]:
    """Return the sorted, deduplicated password candidates for the options."""
    current_year = (today or date.today()).year

    passwords = base_passwords(options, current_year)
    for stage in pipeline_for_depth(options.depth):
        passwords = stage(passwords)

    return sorted(set(passwords))
