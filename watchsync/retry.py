"""
Fetch-until-non-empty retry loop.

The listing site now and then serves an empty or half-rendered page, so any
attempt that yields nothing usable is retried after a fixed delay. Without
an attempt bound the loop only ends on success.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Sized
from typing import Any, TypeVar

import requests

from watchsync.errors import RetryExhaustedError, TransientFetchError
from watchsync.logging_utils import log_event
from watchsync.types import FetchAttempt

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRYABLE_ERRORS: tuple[type[Exception], ...] = (TransientFetchError, requests.RequestException)


def result_count(result: Any) -> int:
    """
    Default success measure: ints count as themselves, containers by length.
    """

    if result is None:
        return 0
    if isinstance(result, int):
        return result
    if isinstance(result, Sized):
        return len(result)
    raise TypeError(f"Cannot measure fetch result of type {type(result).__name__}.")


def iter_attempts(
    fetchable: Callable[[], T],
    *,
    count: Callable[[T], int] = result_count,
    retry_delay_seconds: float = 5.0,
    max_attempts: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "fetch",
) -> Iterator[FetchAttempt[T]]:
    """
    Yield one FetchAttempt per cycle until a cycle produces a non-zero count.

    The delay is taken before every attempt except the first, so a bounded
    loop never sleeps after its final attempt.
    """

    attempt_number = 0
    while max_attempts is None or attempt_number < max_attempts:
        attempt_number += 1
        if attempt_number > 1:
            sleep(retry_delay_seconds)
            log_event(
                logger,
                logging.INFO,
                "fetch_retry",
                label=label,
                attempt=attempt_number,
            )

        try:
            result = fetchable()
        except RETRYABLE_ERRORS as exc:
            yield FetchAttempt(attempt_number=attempt_number, succeeded=False, error=str(exc))
            continue

        if count(result) != 0:
            yield FetchAttempt(attempt_number=attempt_number, succeeded=True, result=result)
            return
        yield FetchAttempt(
            attempt_number=attempt_number,
            succeeded=False,
            result=result,
            error="empty result",
        )


def fetch_with_retry(
    fetchable: Callable[[], T],
    *,
    count: Callable[[T], int] = result_count,
    retry_delay_seconds: float = 5.0,
    max_attempts: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "fetch",
) -> T:
    """
    Run `fetchable` until it yields a non-zero count and return that result.

    Raises RetryExhaustedError only when `max_attempts` is set and used up.
    """

    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be positive or None.")

    last_error: str | None = None
    for attempt in iter_attempts(
        fetchable,
        count=count,
        retry_delay_seconds=retry_delay_seconds,
        max_attempts=max_attempts,
        sleep=sleep,
        label=label,
    ):
        if attempt.succeeded:
            return attempt.result  # type: ignore[return-value]
        last_error = attempt.error
        log_event(
            logger,
            logging.WARNING,
            "fetch_attempt_failed",
            label=label,
            attempt=attempt.attempt_number,
            max_attempts=max_attempts,
            retry_delay_seconds=retry_delay_seconds,
            error=attempt.error,
        )

    raise RetryExhaustedError(
        f"{label}: no result after {max_attempts} attempts (last error: {last_error})",
        attempts=max_attempts or 0,
    )
