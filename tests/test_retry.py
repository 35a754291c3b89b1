import time

import pytest

from modelmeta.retry import (
    DEFAULT_RETRY_CONFIG,
    RetryConfig,
    RetryTimeoutError,
    retry_with_exponential_backoff,
)


def test_success_after_one_failure():
    attempts = []
    config = RetryConfig(
        max_retries=3, initial_backoff=0.01, max_backoff=0.1, multiplier=2.0, overall_timeout=0
    )

    def operation():
        attempts.append(1)
        if len(attempts) < 2:
            raise RuntimeError("temporary failure")
        return "success"

    assert retry_with_exponential_backoff(config, operation, "test operation") == "success"
    assert len(attempts) == 2


def test_all_failures_raise_last_error():
    attempts = []
    config = RetryConfig(
        max_retries=2, initial_backoff=0.01, max_backoff=0.1, multiplier=2.0, overall_timeout=0
    )

    def operation():
        attempts.append(1)
        raise RuntimeError(f"persistent failure {len(attempts)}")

    with pytest.raises(RuntimeError, match="persistent failure 3"):
        retry_with_exponential_backoff(config, operation, "test operation")
    assert len(attempts) == config.max_retries + 1


def test_immediate_success_with_defaults():
    attempts = []

    def operation():
        attempts.append(1)
        return 42

    assert retry_with_exponential_backoff(DEFAULT_RETRY_CONFIG, operation, "test operation") == 42
    assert len(attempts) == 1


def test_default_config_values():
    assert DEFAULT_RETRY_CONFIG == RetryConfig(
        max_retries=3,
        initial_backoff=1.0,
        max_backoff=30.0,
        multiplier=2.0,
        overall_timeout=120.0,
    )


def test_backoff_is_capped():
    config = RetryConfig(
        max_retries=5, initial_backoff=0.05, max_backoff=0.1, multiplier=10.0, overall_timeout=0
    )

    def operation():
        raise ValueError("always fail")

    start = time.monotonic()
    with pytest.raises(ValueError, match="always fail"):
        retry_with_exponential_backoff(config, operation, "test operation")
    elapsed = time.monotonic() - start
    assert 0.4 <= elapsed < 1.0


def test_timeout_protection():
    config = RetryConfig(
        max_retries=10,
        initial_backoff=0.1,
        max_backoff=0.5,
        multiplier=2.0,
        overall_timeout=0.3,
    )
    attempts = []

    def operation():
        attempts.append(1)
        time.sleep(0.05)
        raise RuntimeError("slow failure")

    start = time.monotonic()
    with pytest.raises(RetryTimeoutError):
        retry_with_exponential_backoff(config, operation, "test operation")
    elapsed = time.monotonic() - start

    assert len(attempts) <= config.max_retries
    assert elapsed <= config.overall_timeout + 0.2


def test_timeout_error_wraps_last_error():
    config = RetryConfig(
        max_retries=5,
        initial_backoff=0.05,
        max_backoff=0.2,
        multiplier=2.0,
        overall_timeout=0.15,
    )

    def operation():
        time.sleep(0.03)
        raise RuntimeError("operation failed")

    with pytest.raises(RetryTimeoutError) as info:
        retry_with_exponential_backoff(config, operation, "test operation")

    assert "retry timeout exceeded" in str(info.value)
    assert "operation failed" in str(info.value)
    assert isinstance(info.value.__cause__, RuntimeError)
    assert info.value.last_error is info.value.__cause__
    assert info.value.timeout == 0.15


def test_timeout_error_is_a_timeout_error():
    config = RetryConfig(
        max_retries=3, initial_backoff=1.0, max_backoff=1.0, multiplier=1.0, overall_timeout=0.05
    )

    def operation():
        raise OSError("down")

    with pytest.raises(TimeoutError):
        retry_with_exponential_backoff(config, operation, "test operation")


def test_zero_retries_calls_once():
    attempts = []
    config = RetryConfig(max_retries=0, overall_timeout=0)

    def operation():
        attempts.append(1)
        raise KeyError("missing")

    with pytest.raises(KeyError):
        retry_with_exponential_backoff(config, operation, "test operation")
    assert len(attempts) == 1


def test_negative_retries_rejected():
    with pytest.raises(ValueError, match="max_retries"):
        retry_with_exponential_backoff(RetryConfig(max_retries=-1), lambda: 1, "test operation")