"""Deadline handling for store calls."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from dynadocs.domain.exceptions import StoreUnavailableError

T = TypeVar("T")


async def call_store(operation: Awaitable[T], timeout: float | None = None) -> T:
    """Await a store operation, bounded by an optional deadline.

    Args:
        operation: The store coroutine.
        timeout: Deadline in seconds, or None for no deadline.

    Raises:
        StoreUnavailableError: If the deadline expires.
    """
    if timeout is None:
        return await operation
    try:
        return await asyncio.wait_for(operation, timeout)
    except asyncio.TimeoutError as e:
        raise StoreUnavailableError(f"Store call exceeded the {timeout}s deadline") from e
