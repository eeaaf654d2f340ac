"""Unit tests for logfire configuration."""

import pytest

from access.config import ObservabilitySettings
from access.util.observability import sends_to_logfire


class TestSendsToLogfire:
    @pytest.mark.parametrize(
        ("token", "explicit", "expected"),
        [
            (None, None, False),
            ("pylf_v1_token", None, True),
            ("pylf_v1_token", False, False),
            (None, True, True),
        ],
    )
    def test_decision(self, token, explicit, expected):
        observability = ObservabilitySettings(
            logfire_token=token, send_to_logfire=explicit
        )
        assert sends_to_logfire(observability) is expected
