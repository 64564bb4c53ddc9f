"""
Retry helper for idempotent store reads.

Exponential backoff with jitter. Only errors flagged retryable are retried;
writes must never go through here.
"""

import asyncio
import logging
import random
from typing import Awaitable, Callable, Tuple, Type, TypeVar

from ..core.exceptions import StoreConnectionError, StoreTimeoutError


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    operation_name: str,
    max_retries: int = 2,
    initial_delay: float = 0.1,
    max_delay: float = 2.0,
    exponential_base: float = 2.0,
    jitter: bool = True,
    exceptions: Tuple[Type[Exception], ...] = (StoreConnectionError, StoreTimeoutError),
) -> T:
    """
    Await operation(), retrying on the given exceptions.

    Args:
        operation: Zero-argument coroutine factory; called once per attempt
        operation_name: Name used in log messages
        max_retries: Retries after the first attempt (0 disables retrying)
        initial_delay: Delay before the first retry (seconds)
        max_delay: Upper bound for a single delay (seconds)
        exponential_base: Base for exponential backoff
        jitter: Whether to scale each delay by a random factor in [0.5, 1.5)
        exceptions: Exception types that may be retried

    Returns:
        The operation's result

    Raises:
        The last exception once all attempts are exhausted
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except exceptions as e:
            if not getattr(e, "retryable", True):
                logger.warning(f"{operation_name}: Non-retryable error: {e}")
                raise

            if attempt >= max_retries:
                logger.error(
                    f"{operation_name}: All {max_retries + 1} attempts failed. Last error: {e}"
                )
                raise

            delay = min(initial_delay * (exponential_base ** attempt), max_delay)
            if jitter:
                delay = delay * (0.5 + random.random())

            logger.warning(
                f"{operation_name}: Attempt {attempt + 1}/{max_retries + 1} failed: {e}. "
                f"Retrying in {delay:.2f}s..."
            )
            await asyncio.sleep(delay)
            attempt += 1
