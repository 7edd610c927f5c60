from __future__ import annotations

import logging
import ssl
import time
from typing import Optional

import httpx

from .. import __version__
from ..models.results import HttpProbeResult

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 100 * 1024
USER_AGENT = f"SubVet/{__version__} (Subdomain Takeover Scanner)"
DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def describe_http_error(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "Request timeout"
    message = str(exc)
    lowered = message.lower()
    cause = exc.__cause__ or exc.__context__
    if isinstance(cause, ssl.SSLError) or "certificate" in lowered or "ssl" in lowered:
        return "SSL certificate error"
    if "refused" in lowered:
        return "Connection refused"
    if "name or service not known" in lowered or "nodename nor servname" in lowered or "getaddrinfo" in lowered or "name resolution" in lowered:
        return "DNS resolution failed"
    return message or type(exc).__name__


class HttpProber:
    """GET a host over HTTPS, falling back to HTTP when no response came back."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        follow_redirects: bool = True,
        max_body_bytes: int = MAX_BODY_BYTES,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = httpx.Timeout(timeout_seconds)
        self.follow_redirects = follow_redirects
        self.max_body_bytes = max_body_bytes
        self._client = client or httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            headers=DEFAULT_HEADERS,
            verify=True,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def probe(self, host: str) -> HttpProbeResult:
        result = await self.probe_url(f"https://{host}")
        if result.status is not None:
            return result
        return await self.probe_url(f"http://{host}")

    async def probe_url(self, url: str) -> HttpProbeResult:
        start = time.monotonic()
        try:
            async with self._client.stream("GET", url) as resp:
                body: str | None = None
                try:
                    content = bytearray()
                    async for chunk in resp.aiter_bytes():
                        content.extend(chunk)
                        if len(content) >= self.max_body_bytes:
                            break
                    body = bytes(content[: self.max_body_bytes]).decode("utf-8", errors="replace")
                except httpx.HTTPError as exc:
                    # status and headers are still usable without the body
                    logger.debug("http body read failed", extra={"url": url, "error": str(exc)})
                return HttpProbeResult(
                    url=url,
                    status=resp.status_code,
                    body=body,
                    headers={k.lower(): v for k, v in resp.headers.items()},
                    response_time=int((time.monotonic() - start) * 1000),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = describe_http_error(exc)
            logger.debug("http probe failed", extra={"url": url, "error": error})
            return HttpProbeResult(url=url, error=error)
