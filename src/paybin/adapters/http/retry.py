"""HTTP adapter – TransportRetryPolicy (tenacity backed).

Only transport failures are retried, and only for calls the client marks as
safe to repeat. Application errors from the gateway are never retried here.
"""
from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

import tenacity

from paybin.kernel.errors import TransportError
from paybin.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _log_retry(state: tenacity.RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning("transport_retry", attempt=state.attempt_number, error=repr(exc))


class TransportRetryPolicy:
    """Retry an async call on :class:`TransportError` with exponential backoff.

    Parameters
    ----------
    max_attempts:
        Total attempts including the first call. ``1`` disables retrying.
    wait:
        A ``tenacity`` wait strategy. Defaults to
        ``wait_exponential(multiplier=0.2, max=5)``.
    """

    def __init__(self, max_attempts: int = 1, wait: tenacity.wait.wait_base | None = None) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.max_attempts = max_attempts
        self._wait = wait or tenacity.wait_exponential(multiplier=0.2, max=5)

    def _build_async_retrying(self) -> tenacity.AsyncRetrying:
        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_exception_type(TransportError),
            before_sleep=_log_retry,
            reraise=True,
        )

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* with retry."""
        if self.max_attempts == 1:
            return await func()
        async for attempt in self._build_async_retrying():
            with attempt:
                result = await func()
        return result  # type: ignore[return-value]


__all__ = ["TransportRetryPolicy"]
