"""Tests for response signatures and the differential classifier."""

import dataclasses

import pytest

from credprobe.modules.probe import Signature, is_candidate


class TestIsCandidate:
    """Test classification against the baseline."""

    def test_identical_signature_is_not_candidate(self, make_signature):
        baseline = make_signature()
        assert is_candidate(make_signature(), baseline) is False

    def test_status_change_is_candidate(self, make_signature):
        baseline = make_signature(status=200)
        assert is_candidate(make_signature(status=302), baseline) is True

    def test_redirect_change_is_candidate_regardless_of_size(self, make_signature):
        baseline = make_signature(redirects=0, size=1000)
        assert is_candidate(make_signature(redirects=1, size=10), baseline) is True
        assert is_candidate(make_signature(redirects=1, size=1000), baseline) is True

    def test_larger_body_is_candidate(self, make_signature):
        """1200 bytes against 1000 is 12 tenths, above the threshold."""
        baseline = make_signature(size=1000)
        assert is_candidate(make_signature(size=1200), baseline) is True

    def test_ten_percent_larger_is_not_candidate(self, make_signature):
        """Exactly 11 tenths stays below the threshold."""
        baseline = make_signature(size=1000)
        assert is_candidate(make_signature(size=1100), baseline) is False
        assert is_candidate(make_signature(size=1150), baseline) is False

    def test_smaller_body_is_not_candidate(self, make_signature):
        baseline = make_signature(size=1000)
        assert is_candidate(make_signature(size=10), baseline) is False

    def test_empty_baseline_body_does_not_divide(self, make_signature):
        baseline = make_signature(size=0)
        assert is_candidate(make_signature(size=5000), baseline) is False
        assert is_candidate(make_signature(size=0), baseline) is False
        assert is_candidate(make_signature(status=500, size=5000), baseline) is True

    def test_method_delegates_to_function(self, make_signature):
        baseline = make_signature(size=1000)
        assert make_signature(size=1200).is_candidate(baseline) is True
        assert make_signature(size=1100).is_candidate(baseline) is False


class TestSignature:
    """Test the signature value type."""

    def test_is_immutable(self, make_signature):
        signature = make_signature()
        with pytest.raises(dataclasses.FrozenInstanceError):
            signature.status_code = 500  # type: ignore[misc]

    def test_str_matches_log_format(self):
        signature = Signature(
            redirect_count=1,
            status_code=302,
            response_size=512,
            server_processing_time=0.25,
            username="alice",
        )
        assert str(signature) == "Redirects: 1, Status: 302, Length: 512, ServerProcessing: 0.250s"
