"""
Tests for error handling policies.
"""

import logging
from pathlib import Path

import pytest

from bstreelib.error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)


class TestErrorPolicies:
    """Test individual error policy behaviors."""

    def test_fail_fast_policy(self):
        """FailFastPolicy should re-raise any error."""
        policy = FailFastPolicy()

        with pytest.raises(PermissionError):
            policy.handle(PermissionError("Access denied"), "process_file", Path("/test"))

    def test_continue_on_errors_policy(self, caplog):
        """ContinueOnErrorsPolicy should return None, track and log errors."""
        policy = ContinueOnErrorsPolicy(verbose=True)

        with caplog.at_level(logging.WARNING, logger="bstreelib.error_policies"):
            result = policy.handle(PermissionError("Access denied"), "process_file", Path("/test"))

        assert result is None
        assert policy.skipped == [Path("/test")]
        assert "Skipping unreadable" in caplog.text

    def test_continue_on_errors_quiet(self, caplog):
        policy = ContinueOnErrorsPolicy(verbose=False)

        with caplog.at_level(logging.WARNING):
            policy.handle(ValueError("bad"), "load_repository", "repo.json")

        assert caplog.text == ""
        assert len(policy.errors) == 1
        # Non-I/O errors do not count as skipped subjects
        assert policy.skipped == []

    def test_collect_errors_policy(self):
        """CollectErrorsPolicy should record silently."""
        policy = CollectErrorsPolicy()

        policy.handle(FileNotFoundError("missing"), "process_file", Path("a.txt"))
        policy.handle(ValueError("bad"), "load_repository", Path("r.json"))

        stats = policy.get_statistics()
        assert stats['total_errors'] == 2
        assert stats['os_errors'] == 1
        assert stats['skipped'] == 1
        assert stats['errors'][1]['error_type'] == 'ValueError'
        assert stats['errors'][1]['operation'] == 'load_repository'
        assert stats['errors'][1]['error_message'] == 'bad'

    def test_threshold_policy(self):
        """ThresholdPolicy should fail after max_errors."""
        policy = ThresholdPolicy(max_errors=2, verbose=False)

        assert policy.handle(OSError("1"), "process_file", "a") is None
        assert policy.handle(OSError("2"), "process_file", "b") is None

        with pytest.raises(RuntimeError, match="threshold exceeded") as exc_info:
            policy.handle(OSError("3"), "process_file", "c")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert policy.error_count == 3

    def test_policy_is_abstract(self):
        with pytest.raises(TypeError):
            ErrorPolicy()
