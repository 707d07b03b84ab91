"""Response signatures and the differential classifier."""

from __future__ import annotations

from dataclasses import dataclass

# Body size ratio, in tenths, above which a response counts as a different page.
SIZE_RATIO_THRESHOLD = 11


@dataclass(frozen=True, slots=True)
class Signature:
    """Observable fingerprint of a single authentication attempt."""

    redirect_count: int
    status_code: int
    response_size: int
    server_processing_time: float
    username: str = ""

    def __str__(self) -> str:
        return (
            f"Redirects: {self.redirect_count}, Status: {self.status_code}, "
            f"Length: {self.response_size}, "
            f"ServerProcessing: {self.server_processing_time:.3f}s"
        )

    def is_candidate(self, baseline: Signature) -> bool:
        """Return True when this signature differs from the baseline."""
        return is_candidate(self, baseline)


def is_candidate(signature: Signature, baseline: Signature) -> bool:
    """Classify a signature against the known-invalid baseline.

    A different redirect count or status code is always a candidate. Otherwise
    the body must be more than ten percent larger than the baseline body,
    compared in integer tenths, so a body exactly ten percent larger is not
    flagged. An empty baseline body cannot be compared by size.
    """
    if (
        signature.redirect_count != baseline.redirect_count
        or signature.status_code != baseline.status_code
    ):
        return True

    if baseline.response_size == 0:
        return False

    ratio = signature.response_size * 10 // baseline.response_size
    return ratio > SIZE_RATIO_THRESHOLD
