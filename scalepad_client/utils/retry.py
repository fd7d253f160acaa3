"""
Retry utilities for ScalePad SDK.

Wraps a fallible coroutine function with bounded retries and exponential
backoff with jitter. Which failures are retried is decided per error kind
and by the client's RetryConfig; a Retry-After value on a rate-limit
response takes precedence over the computed backoff.
"""

import asyncio
import random
from typing import Awaitable, Callable, Optional, TypeVar

from ..errors import ErrorKind, RateLimitError, RequestError
from ..models.config import DEFAULT_BASE_DELAY_MS, DEFAULT_MAX_DELAY_MS, RetryConfig
from ..services.logger import Logger

T = TypeVar("T")

JITTER_RATIO = 0.3


def calculate_backoff(
    attempt: int,
    base_delay_ms: float = DEFAULT_BASE_DELAY_MS,
    max_delay_ms: float = DEFAULT_MAX_DELAY_MS,
) -> float:
    """
    Calculate exponential backoff delay with jitter.

    The capped delay ``min(base * 2**attempt, max)`` gets up to 30% random
    jitter added on top, so the result may exceed ``max_delay_ms`` by 30%.

    Args:
        attempt: Zero-based index of the attempt that just failed
        base_delay_ms: Delay for the first retry
        max_delay_ms: Cap applied before jitter

    Returns:
        Delay in milliseconds
    """
    exponential_delay = min(base_delay_ms * (2**attempt), max_delay_ms)
    jitter = random.uniform(0, JITTER_RATIO * exponential_delay)
    return exponential_delay + jitter


async def sleep(delay_ms: float, cancel_event: Optional[asyncio.Event] = None) -> None:
    """
    Suspend the current task for ``delay_ms`` milliseconds.

    Returns early when ``cancel_event`` is set.
    """
    if cancel_event is None:
        await asyncio.sleep(delay_ms / 1000)
        return
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=delay_ms / 1000)
    except asyncio.TimeoutError:
        pass


def should_retry(error: BaseException, config: RetryConfig) -> bool:
    """
    Determine if an error should be retried.

    Args:
        error: Failure raised by the operation
        config: Retry policy

    Returns:
        True if another attempt may be made
    """
    if not isinstance(error, RequestError):
        return False

    match error.kind:
        case ErrorKind.RATE_LIMIT:
            return config.retry_on_429
        case ErrorKind.API:
            status = error.status_code or 0
            return config.retry_on_5xx and 500 <= status < 600
        case ErrorKind.NETWORK | ErrorKind.TIMEOUT:
            return True
        case _:
            return False


def compute_delay(error: BaseException, attempt: int, config: RetryConfig) -> float:
    """
    Compute the delay before the next attempt, in milliseconds.

    Rate-limit errors carrying a Retry-After value wait exactly that long;
    everything else uses exponential backoff.
    """
    if isinstance(error, RateLimitError) and error.retry_after is not None:
        return error.retry_after * 1000
    return calculate_backoff(attempt, config.base_delay_ms, config.max_delay_ms)


def _describe_failure(error: BaseException) -> str:
    if isinstance(error, RateLimitError) and error.retry_after is not None:
        return f"Rate limited. Retrying after {error.retry_after}s"
    if isinstance(error, RequestError) and error.status_code is not None:
        return f"Server error {error.status_code}. Retrying"
    return "Request failed. Retrying"


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig,
    logger: Logger,
    cancel_event: Optional[asyncio.Event] = None,
) -> T:
    """
    Execute a coroutine function with retry logic.

    The operation is invoked at most ``config.max_retries + 1`` times. A
    failure that is not retryable, or the failure of the last permitted
    attempt, is raised unchanged. Setting ``cancel_event`` stops further
    retries and cuts a pending delay short; the last failure is raised.

    Args:
        operation: Zero-argument coroutine function performing one attempt
        config: Retry policy
        logger: Logger for retry warnings
        cancel_event: Optional external cancellation signal

    Returns:
        Result of the first successful attempt

    Raises:
        RequestError: Last failure when retries are exhausted or not allowed
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except RequestError as error:
            if attempt >= config.max_retries or not should_retry(error, config):
                raise
            if cancel_event is not None and cancel_event.is_set():
                raise

            delay_ms = compute_delay(error, attempt, config)
            logger.warn(
                f"{_describe_failure(error)} in {round(delay_ms)}ms "
                f"(attempt {attempt + 1}/{config.max_retries})"
            )
            await sleep(delay_ms, cancel_event)
            if cancel_event is not None and cancel_event.is_set():
                raise
            attempt += 1
