"""Probe configuration model."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:63.0) Gecko/20100101 Firefox/63.0"
)
DEFAULT_WAIT = 10.0
DEFAULT_JITTER = 5.0
MAX_REDIRECTS = 10


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    """Settings threaded into the prober and its submitter."""

    wait: float = DEFAULT_WAIT
    jitter: float = DEFAULT_JITTER
    verbose: bool = False
    max_redirects: int = MAX_REDIRECTS
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.wait < 0:
            raise ValueError("wait must be >= 0")
        if self.jitter < 0:
            raise ValueError("jitter must be >= 0")
        if self.max_redirects < 0:
            raise ValueError("max_redirects must be >= 0")
