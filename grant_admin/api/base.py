"""Shared HTTP settings for admin API calls."""

import logging

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

logger = logging.getLogger(__name__)

# Standard timeout for all API calls: 30s connect, 60s read
API_TIMEOUT = httpx.Timeout(connect=30.0, read=60.0, write=30.0, pool=30.0)


def build_timeout(connect: float, read: float) -> httpx.Timeout:
    return httpx.Timeout(connect=connect, read=read, write=connect, pool=connect)


def fetch_retry(attempts: int = 1, wait=None):
    """Retry decorator for idempotent GETs on transport errors.

    attempts=1 means a single try. Creation POSTs are never wrapped with
    this: a retried POST could create the same milestone twice.
    """
    return retry(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait if wait is not None else wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(httpx.TransportError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
