"""Probe orchestration: baseline, paced attempts and classification."""

from __future__ import annotations

import asyncio
import logging
import random
import string
from collections.abc import Awaitable, Callable, Iterator, Sequence

from .errors import BaselineError, ProbeError
from .models import ProbeConfig
from .signature import Signature, is_candidate
from .submitters import CredentialSubmitter

logger = logging.getLogger(__name__)

BASELINE_USERNAME_LENGTH = 8
BASELINE_PASSWORD_LENGTH = 13
_ALPHANUMERIC = string.ascii_letters + string.digits


class Prober:
    """Drive credential attempts against one target, one at a time.

    Every combination of username and password is tried in username-major
    order and compared with a baseline produced by random credentials. Any
    error aborts the whole run: once the target misbehaves its responses can
    no longer be compared with the baseline.
    """

    def __init__(
        self,
        submitter: CredentialSubmitter,
        usernames: Sequence[str],
        passwords: Sequence[str],
        config: ProbeConfig,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.submitter = submitter
        self.usernames = list(usernames)
        self.passwords = list(passwords)
        self.config = config
        self.candidates: list[str] = []
        self.baseline: Signature | None = None
        self._sleep = sleep
        self._rng = rng or random.Random()

    @property
    def attempt_count(self) -> int:
        return len(self.usernames) * len(self.passwords)

    def estimated_duration(self) -> float:
        """Return the worst-case run time in minutes."""
        return self.attempt_count * (self.config.wait + self.config.jitter) / 60

    def combinations(self) -> Iterator[tuple[str, str]]:
        for username in self.usernames:
            for password in self.passwords:
                yield username, password

    def _random_string(self, length: int) -> str:
        return "".join(self._rng.choice(_ALPHANUMERIC) for _ in range(length))

    def pause_duration(self) -> float:
        return self.config.wait + self._rng.uniform(0, self.config.jitter)

    async def establish_baseline(self) -> Signature:
        """Fingerprint a response to credentials that cannot be valid."""
        username = self._random_string(BASELINE_USERNAME_LENGTH)
        password = self._random_string(BASELINE_PASSWORD_LENGTH)
        try:
            baseline = await self.submitter.try_credentials(username, password)
        except ProbeError as exc:
            raise BaselineError(f"Cannot establish baseline: {exc}") from exc
        logger.info("Baseline: %s", baseline)
        self.baseline = baseline
        return baseline

    async def run(self) -> list[str]:
        """Try every combination and return the candidates found."""
        baseline = await self.establish_baseline()

        total = self.attempt_count
        for attempt, (username, password) in enumerate(self.combinations(), start=1):
            signature = await self.submitter.try_credentials(username, password)
            if is_candidate(signature, baseline):
                logger.info("Candidate found: %s (%s)", username, signature)
                self.candidates.append(f"{username}|{password}")
            else:
                logger.debug("[%d/%d] %s rejected", attempt, total, username)

            await self._sleep(self.pause_duration())

        return self.candidates
