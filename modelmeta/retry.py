"""Retrying an operation with exponential backoff and an overall deadline."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    """Retry behaviour; durations are in seconds, a timeout of 0 means none."""

    max_retries: int = 3
    initial_backoff: float = 1.0
    max_backoff: float = 30.0
    multiplier: float = 2.0
    overall_timeout: float = 120.0


DEFAULT_RETRY_CONFIG = RetryConfig()


class RetryTimeoutError(TimeoutError):
    """Raised when the overall timeout passes before the operation succeeds."""

    def __init__(self, timeout: float, last_error: BaseException):
        super().__init__(f"retry timeout exceeded after {timeout}s: {last_error}")
        self.timeout = timeout
        self.last_error = last_error


def _timeout(config: RetryConfig, last_error: Exception | None) -> RetryTimeoutError:
    cause = last_error if last_error is not None else TimeoutError("deadline exceeded")
    error = RetryTimeoutError(config.overall_timeout, cause)
    error.__cause__ = cause
    return error


def _backoff(config: RetryConfig, attempt: int) -> float:
    try:
        delay = config.initial_backoff * config.multiplier ** (attempt - 1)
    except OverflowError:
        return config.max_backoff
    return min(delay, config.max_backoff)


def retry_with_exponential_backoff(
    config: RetryConfig, operation: Callable[[], T], operation_name: str
) -> T:
    """Call operation until it returns, retrying on exceptions with growing delays.

    The last exception is raised again when all attempts fail, and
    RetryTimeoutError is raised when the overall timeout runs out first.
    """
    if config.max_retries < 0:
        raise ValueError("max_retries must not be negative")

    deadline = (
        time.monotonic() + config.overall_timeout if config.overall_timeout > 0 else None
    )
    last_error: Exception | None = None

    for attempt in range(config.max_retries + 1):
        if deadline is not None and time.monotonic() >= deadline:
            _log.warning("  Retry timeout exceeded for %s", operation_name)
            raise _timeout(config, last_error)

        if attempt > 0:
            delay = _backoff(config, attempt)
            _log.info(
                "  Retry %d/%d for %s after %.3fs backoff",
                attempt,
                config.max_retries,
                operation_name,
                delay,
            )
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= delay:
                    time.sleep(max(remaining, 0.0))
                    _log.warning(
                        "  Retry timeout exceeded during backoff for %s", operation_name
                    )
                    raise _timeout(config, last_error)
            time.sleep(delay)

        try:
            result = operation()
        except Exception as exc:
            last_error = exc
            if attempt < config.max_retries:
                _log.info(
                    "  Attempt %d/%d failed for %s: %s",
                    attempt + 1,
                    config.max_retries + 1,
                    operation_name,
                    exc,
                )
            continue

        if attempt > 0:
            _log.info("  Successfully recovered after %d retries for %s", attempt, operation_name)
        return result

    _log.warning(
        "  All %d retry attempts exhausted for %s: %s",
        config.max_retries + 1,
        operation_name,
        last_error,
    )
    assert last_error is not None
    raise last_error