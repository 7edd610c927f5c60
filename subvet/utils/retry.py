from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

RETRY_BASE_DELAY_SECONDS = 0.1
DEFAULT_RETRY_COUNT = 2


async def with_retry(
    func: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRY_COUNT,
    base_delay: float = RETRY_BASE_DELAY_SECONDS,
    on_retry: Optional[Callable[[int, Exception], None]] = None,
) -> T:
    """Await ``func()`` up to ``retries + 1`` times with exponential backoff.

    Callers opt in; the DNS and HTTP evidence paths make one attempt per query.
    """
    last_exc: Optional[Exception] = None
    for attempt in range(retries + 1):
        try:
            return await func()
        except Exception as exc:
            last_exc = exc
            if attempt < retries:
                if on_retry:
                    on_retry(attempt + 1, exc)
                logger.debug("retrying", extra={"attempt": attempt + 1, "error": str(exc)})
                await asyncio.sleep(base_delay * (2 ** attempt))
    if last_exc:
        raise last_exc
    raise RuntimeError("retry called with no attempts")
