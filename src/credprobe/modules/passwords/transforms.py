"""Password transformation stages.

A stage maps a list of passwords to a longer list that always keeps the
originals. Stages are chained by ``generator.generate`` according to depth.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

Stage = Callable[[Iterable[str]], list[str]]

LEET_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (("o", "0"), ("i", "1"), ("e", "3"))


def capitalize(value: str) -> str:
    """Uppercase the first character when it is a letter."""
    if value and value[0].isalpha():
        return value[0].upper() + value[1:]
    return value


def leet(value: str) -> str:
    """Apply every light leet-speak substitution at once."""
    return value.translate(str.maketrans(dict(LEET_SUBSTITUTIONS)))


def capitalize_stage(passwords: Iterable[str]) -> list[str]:
    out: list[str] = []
    for password in passwords:
        out.append(password)
        out.append(capitalize(password))
    return out


def leet_stage(passwords: Iterable[str]) -> list[str]:
    """Add each single substitution and the combined one for every password."""
    out: list[str] = []
    for password in passwords:
        out.append(password)
        out.extend(password.replace(old, new) for old, new in LEET_SUBSTITUTIONS)
        out.append(leet(password))
    return out


DEPTH_PIPELINES: dict[int, tuple[Stage, ...]] = {
    0: (),
    1: (capitalize_stage,),
    2: (leet_stage,),
    3: (leet_stage, capitalize_stage),
}
MAX_DEPTH = max(DEPTH_PIPELINES)


def pipeline_for_depth(depth: int) -> tuple[Stage, ...]:
    """Return the stages for a depth; out-of-range depths are clamped."""
    return DEPTH_PIPELINES[min(max(depth, 0), MAX_DEPTH)]
