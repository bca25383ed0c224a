"""
Retrying Collaborator Reads

Connection failures from a storage backend are retried with exponential
backoff. Any other storage error is raised immediately.
"""

from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from networth.config import StorageSettings, get_settings
from networth.logger import get_logger
from networth.services.storage.interface import StorageConnectionError


T = TypeVar("T")

_logger = get_logger("networth.storage")


def _log_retry(retry_state: RetryCallState, operation: Callable[..., Any]) -> None:
    _logger.warning(
        "storage_retry",
        operation=getattr(operation, "__qualname__", repr(operation)),
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()) if retry_state.outcome else None,
    )


async def read_with_retry(
    operation: Callable[..., Awaitable[T]],
    *args: Any,
    settings: Optional[StorageSettings] = None,
) -> T:
    """Await `operation(*args)`, retrying on StorageConnectionError."""
    settings = settings or get_settings().storage
    retrying = AsyncRetrying(
        stop=stop_after_attempt(settings.retry_attempts),
        wait=wait_exponential(
            multiplier=1,
            min=settings.retry_wait_min_seconds,
            max=settings.retry_wait_max_seconds,
        ),
        retry=retry_if_exception_type(StorageConnectionError),
        before_sleep=lambda state: _log_retry(state, operation),
        reraise=True,
    )
    async for attempt in retrying:
        with attempt:
            return await operation(*args)
