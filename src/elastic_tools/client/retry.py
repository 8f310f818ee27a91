"""Opt-in retry for result-returning calls.

The request pipeline never retries. Callers that want retries wrap their own
calls with the decorator built here.
"""

import logging
from typing import Callable

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_result,
    stop_after_attempt,
    wait_exponential_jitter,
)

from .results import Error, Result, TransportError

logger = logging.getLogger("elastic-tools")


# Shared retry configuration
RETRY_CONFIG = {
    "attempts": 3,
    "wait": wait_exponential_jitter(initial=1, max=10, jitter=2),
}


def is_retryable_status_code(status_code: int) -> bool:
    """Check if an HTTP status code indicates a retryable error.

    Returns:
        True if the status code is 429 (rate limit) or 5xx (server error)
    """
    return status_code == 429 or (500 <= status_code < 600)


def is_retryable_result(result: Result) -> bool:
    """Check if a result is worth retrying.

    Transport errors are retried, except local decode failures which would
    fail the same way again. Errors are retried for 429 and 5xx.
    """
    if isinstance(result, TransportError):
        return result.reason != "decode"
    if isinstance(result, Error):
        return is_retryable_status_code(result.status_code)
    return False


def _last_result(retry_state):
    return retry_state.outcome.result()


def retrying(attempts: int | None = None, wait=None) -> Callable:
    """Create a retry decorator for functions returning a ``Result``.

    When attempts run out the last result is returned, not raised.

    Args:
        attempts: Maximum number of calls (default 3)
        wait: tenacity wait strategy (default exponential backoff with jitter)

    Example:
        @retrying(attempts=5)
        def fetch():
            return http.get("/answer/_doc/1")
    """
    return retry(
        stop=stop_after_attempt(attempts or RETRY_CONFIG["attempts"]),
        wait=wait or RETRY_CONFIG["wait"],
        retry=retry_if_result(is_retryable_result),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        retry_error_callback=_last_result,
    )


def call_with_retries(fn: Callable[[], Result], attempts: int = 1, wait=None) -> Result:
    """Call ``fn`` up to ``attempts`` times. One attempt means no retry."""
    if attempts <= 1:
        return fn()
    return retrying(attempts, wait)(fn)()
