import asyncio

import pytest

from subvet.utils.retry import with_retry


def test_retry_until_success():
    attempts = []
    seen = []

    async def flaky():
        attempts.append(1)
        if len(attempts) < 3:
            raise ConnectionError("reset")
        return "ok"

    result = asyncio.run(with_retry(flaky, retries=2, base_delay=0, on_retry=lambda n, exc: seen.append((n, str(exc)))))

    assert result == "ok"
    assert len(attempts) == 3
    assert seen == [(1, "reset"), (2, "reset")]


def test_retry_raises_last_error():
    async def broken():
        raise TimeoutError("slow")

    with pytest.raises(TimeoutError):
        asyncio.run(with_retry(broken, retries=1, base_delay=0))
