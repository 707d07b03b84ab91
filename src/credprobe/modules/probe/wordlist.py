"""Username and password list loading."""

from __future__ import annotations

from pathlib import Path


def load_wordlist(value: str) -> list[str]:
    """Load a word list from a file path or a comma-separated string.

    Files yield one stripped entry per non-empty line; anything else is split
    on commas. Order is preserved.
    """
    if not value:
        return []

    path = Path(value).expanduser()
    if path.is_file():
        lines = path.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip()]

    return [item.strip() for item in value.split(",") if item.strip()]
