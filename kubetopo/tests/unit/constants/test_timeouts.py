"""Unit tests for timeout constants in constants/timeouts.py."""

from __future__ import annotations

from kubetopo.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    METRICS_HEALTH_CHECK_TIMEOUT,
    POLL_DEADLINE,
    POLL_INTERVAL,
    RETRY_BACKOFF,
)


class TestTimeouts:
    """Test timeout magnitudes."""

    def test_all_positive_floats(self) -> None:
        for value in (
            CLUSTER_REQUEST_TIMEOUT,
            METRICS_HEALTH_CHECK_TIMEOUT,
            POLL_DEADLINE,
            POLL_INTERVAL,
            RETRY_BACKOFF,
        ):
            assert isinstance(value, float)
            assert value > 0

    def test_deadline_exceeds_request_timeout(self) -> None:
        assert POLL_DEADLINE > CLUSTER_REQUEST_TIMEOUT

    def test_health_check_shorter_than_requests(self) -> None:
        assert METRICS_HEALTH_CHECK_TIMEOUT < CLUSTER_REQUEST_TIMEOUT
