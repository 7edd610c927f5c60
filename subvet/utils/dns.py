from __future__ import annotations

import asyncio
import logging
import time
from typing import List

import dns.asyncresolver
import dns.exception
import dns.resolver

logger = logging.getLogger(__name__)

DNS_TIMEOUT_SECONDS = 5.0


class DnsFailure(Exception):
    """A DNS query that produced no answer."""

    permanent = False

    def __init__(self, name: str, record_type: str, reason: str) -> None:
        super().__init__(f"{record_type} {name}: {reason}")
        self.name = name
        self.record_type = record_type
        self.reason = reason


class PermanentDnsFailure(DnsFailure):
    """NXDOMAIN or an empty answer (ENOTFOUND/ENODATA)."""

    permanent = True


class TransientDnsFailure(DnsFailure):
    """SERVFAIL, timeout or any other resolver error. Never evidence of a dangling record."""


def _rdata_to_text(rdata, record_type: str) -> str:
    if record_type in ("A", "AAAA"):
        return rdata.address
    if record_type in ("CNAME", "NS"):
        return rdata.target.to_text()
    if record_type == "MX":
        return f"{rdata.preference} {rdata.exchange.to_text()}"
    if record_type == "TXT":
        return b"".join(rdata.strings).decode("utf-8", errors="replace")
    if record_type == "SRV":
        return f"{rdata.priority} {rdata.weight} {rdata.port} {rdata.target.to_text()}"
    return rdata.to_text()


class DnsClient:
    """One query per call, raced against a per-call deadline.

    Values come back as text: addresses for A/AAAA, targets for CNAME/NS,
    ``"<pref> <exchange>"`` for MX, joined strings for TXT and
    ``"<prio> <weight> <port> <target>"`` for SRV.
    """

    def __init__(self, timeout_seconds: float = DNS_TIMEOUT_SECONDS, resolver: dns.asyncresolver.Resolver | None = None) -> None:
        self.timeout_seconds = timeout_seconds
        self.resolver = resolver or dns.asyncresolver.Resolver()

    async def query(self, name: str, record_type: str) -> List[str]:
        record_type = record_type.upper()
        start = time.monotonic()
        try:
            answer = await asyncio.wait_for(
                self.resolver.resolve(name, record_type, lifetime=self.timeout_seconds),
                timeout=self.timeout_seconds,
            )
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer) as exc:
            raise PermanentDnsFailure(name, record_type, "ENOTFOUND" if isinstance(exc, dns.resolver.NXDOMAIN) else "ENODATA") from exc
        except dns.resolver.NoNameservers as exc:
            raise TransientDnsFailure(name, record_type, "SERVFAIL") from exc
        except (asyncio.TimeoutError, dns.exception.Timeout) as exc:
            raise TransientDnsFailure(name, record_type, "timeout") from exc
        except Exception as exc:  # pragma: no cover - network
            logger.debug("dns lookup failed", extra={"domain": name, "type": record_type, "error": str(exc)})
            raise TransientDnsFailure(name, record_type, str(exc) or type(exc).__name__) from exc
        values = [_rdata_to_text(r, record_type) for r in answer]
        logger.debug(
            "dns lookup ok",
            extra={"domain": name, "type": record_type, "count": len(values), "duration_ms": int((time.monotonic() - start) * 1000)},
        )
        if not values:
            raise PermanentDnsFailure(name, record_type, "ENODATA")
        return values


def describe_failure(failure: DnsFailure) -> str:
    if failure.reason == "SERVFAIL":
        return "DNS server failure"
    if failure.reason == "timeout":
        return "DNS timeout"
    return f"DNS query failed: {failure.reason}"
