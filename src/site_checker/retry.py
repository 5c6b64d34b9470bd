"""Fixed-backoff retry wrapper for collaborator calls.

Page fetches are never retried; this is for calls such as the external
text-generation client, where one transient failure should not lose the
whole diagnosis.
"""

from __future__ import annotations

import logging

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

logger = logging.getLogger(__name__)


def with_retry(
    max_attempts: int = 3,
    backoff: float = 2.0,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
):
    """Decorator retrying up to ``max_attempts`` times, ``backoff`` seconds apart.

    The last exception is re-raised once attempts run out.
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_fixed(backoff),
        retry=retry_if_exception_type(retry_on),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
